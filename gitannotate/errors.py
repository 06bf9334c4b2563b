# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

class AnnotateError(Exception):
    """ Opening the annotation sidebar was aborted. Nothing was created. """

    def __init__(self, text: str = "", details: str = ""):
        super().__init__(text)
        self.text = text
        self.details = details

    def fullText(self) -> str:
        if self.details:
            return f"{self.text}\n{self.details}"
        return self.text


class NoFileError(AnnotateError):
    def __init__(self):
        super().__init__("Git annotate: No file associated with current view")


class BlameFailedError(AnnotateError):
    def __init__(self, rawOutput: str, exitCode: int):
        super().__init__("Git annotate: git blame failed", rawOutput)
        self.exitCode = exitCode


class NothingToAnnotateError(AnnotateError):
    def __init__(self, path: str):
        super().__init__("Git annotate: nothing to annotate (empty blame output)", path)
