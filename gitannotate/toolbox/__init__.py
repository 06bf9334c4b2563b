# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

# Qt-dependent helpers live in gitannotate.toolbox.qtutils and must be imported
# explicitly, so that the Qt-free core can use the benchmark tools.
from gitannotate.toolbox.benchmark import BENCHMARK_LOGGING_LEVEL, Benchmark, benchmark
