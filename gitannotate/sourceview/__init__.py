# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from gitannotate.sourceview.annotationpane import AnnotationPane
from gitannotate.sourceview.sourcehighlighter import SourceHighlighter, lexerForPath
from gitannotate.sourceview.sourceview import SourceView
