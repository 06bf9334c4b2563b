# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import dataclasses
import enum
import json
import logging
import os

from gitannotate.qt import *

logger = logging.getLogger(__name__)


class PrefsFile:
    """
    Mixin for dataclasses that are saved to a JSON file in the user's config
    directory. Fields whose names start with an underscore aren't saved.
    """

    _filename = ""
    _dirty = False

    @staticmethod
    def configDir() -> str:
        # Same location that qt.py peeks at to pick a Qt binding before the app boots
        location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericConfigLocation)
        return os.path.join(location, APP_SYSTEM_NAME)

    def fullPath(self) -> str:
        assert self._filename, "PrefsFile subclass must define _filename"
        return os.path.join(self.configDir(), self._filename)

    def setDirty(self):
        self._dirty = True

    def reset(self):
        for field in dataclasses.fields(self):
            if field.default_factory is not dataclasses.MISSING:
                setattr(self, field.name, field.default_factory())
            else:
                setattr(self, field.name, field.default)
        self._dirty = False

    def savedFields(self):
        return [f for f in dataclasses.fields(self) if not f.name.startswith("_")]

    def toDict(self) -> dict:
        data = {}
        for field in self.savedFields():
            value = getattr(self, field.name)
            if isinstance(value, enum.Enum):
                value = value.value
            data[field.name] = value
        return data

    def loadDict(self, data: dict):
        knownFields = {f.name: f for f in self.savedFields()}

        for key, value in data.items():
            try:
                field = knownFields[key]
            except KeyError:
                logger.warning(f"{self._filename}: ignoring unknown key '{key}'")
                continue

            default = None if field.default is dataclasses.MISSING else field.default

            try:
                value = self._coerce(value, default)
            except (TypeError, ValueError):
                logger.warning(f"{self._filename}: bad value for '{key}': {value!r}")
                continue

            setattr(self, key, value)

    @staticmethod
    def _coerce(value, default):
        if default is None:
            return value
        if isinstance(default, enum.Enum):
            return type(default)(value)
        if isinstance(default, bool):
            if not isinstance(value, bool):
                raise TypeError("expected bool")
            return value
        if isinstance(default, int):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError("expected int")
            return value
        if not isinstance(value, type(default)):
            raise TypeError(f"expected {type(default).__name__}")
        return value

    def load(self) -> bool:
        if APP_TESTMODE:
            return False

        path = self.fullPath()
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return False
        except (OSError, ValueError) as exc:
            logger.warning(f"Couldn't read {path}: {exc}")
            return False

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {path}: top level isn't an object")
            return False

        self.loadDict(data)
        self._dirty = False
        return True

    def write(self, force=False):
        if APP_TESTMODE and not force:
            logger.debug(f"Not writing {self._filename} in test mode")
            return None

        if not self._dirty and not force:
            return None

        path = self.fullPath()
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.toDict(), f, indent="\t")
        self._dirty = False
        logger.info(f"Wrote {path}")
        return path
