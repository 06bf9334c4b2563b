# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import logging
import os
import shlex

import pygit2

from gitannotate.blame import splitGitOutput
from gitannotate.host import BlameResult
from gitannotate.qt import *
from gitannotate.toolbox.benchmark import benchmark

logger = logging.getLogger(__name__)


class GitDriver:
    _commandStem = ["git"]

    @classmethod
    def setGitPath(cls, gitPath: str):
        # Treat command as POSIX even on Windows!
        tokens = shlex.split(gitPath, posix=True)
        cls._commandStem = tokens or ["git"]

    @classmethod
    def findWorkdir(cls, path: str) -> str:
        """
        Return the working directory of the repository containing `path`,
        or the file's own directory if it isn't in a repository (git will
        then complain in its own words).
        """
        fileDir = os.path.dirname(os.path.abspath(path))

        repoPath = pygit2.discover_repository(fileDir)
        if not repoPath:
            logger.debug(f"No repository around {fileDir}")
            return fileDir

        repo = pygit2.Repository(repoPath)
        try:
            workdir = repo.workdir
        finally:
            repo.free()

        if not workdir:  # bare repository
            return fileDir
        return os.path.normpath(workdir)

    @classmethod
    def blameCommand(cls, relativePath: str) -> list[str]:
        return [*cls._commandStem, "blame", "--line-porcelain", "--", relativePath]

    @classmethod
    @benchmark
    def runBlame(cls, path: str) -> BlameResult:
        """
        Run git blame on the file and wait for it to finish (no timeout).
        On failure, the result holds git's raw output.
        """
        workdir = cls.findWorkdir(path)
        relativePath = os.path.relpath(os.path.realpath(path), os.path.realpath(workdir))
        tokens = cls.blameCommand(relativePath)

        process = QProcess(None)
        process.setProgram(tokens[0])
        process.setArguments(tokens[1:])
        process.setWorkingDirectory(workdir)
        logger.info(f"runBlame: {shlex.join(tokens)} (in {workdir})")

        process.start()
        if not process.waitForStarted(-1):
            message = f"Couldn't start {tokens[0]}: {process.errorString()}"
            logger.warning(message)
            return BlameResult([message], -1)

        process.waitForFinished(-1)

        stdout = process.readAllStandardOutput().data().decode("utf-8", errors="replace")
        stderr = process.readAllStandardError().data().decode("utf-8", errors="replace")

        if process.exitStatus() != QProcess.ExitStatus.NormalExit:
            exitCode = -1
        else:
            exitCode = process.exitCode()

        if exitCode != 0:
            logger.info(f"git blame exited with code {exitCode}")
            return BlameResult(splitGitOutput(stderr + stdout), exitCode)

        return BlameResult(splitGitOutput(stdout), exitCode)
