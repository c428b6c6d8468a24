"""Static file serving for the pre-built front-end."""

import os
from pathlib import PurePosixPath

from starlette.staticfiles import StaticFiles


class PublicFiles(StaticFiles):
    """StaticFiles that hides dotfiles and tolerates a missing root.

    Any path with a segment starting with "." resolves to nothing, so
    `.env`, `.git/config` and friends answer 404 like any missing file.
    """

    async def check_config(self) -> None:
        # No build output yet: every lookup misses and answers 404
        if self.directory is not None and not os.path.isdir(self.directory):
            return
        await super().check_config()

    def lookup_path(self, path: str):
        if any(part.startswith(".") for part in PurePosixPath(path).parts):
            return "", None
        return super().lookup_path(path)
