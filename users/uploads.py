"""
users/uploads.py — Two-phase storage for profile pictures

A picture is written to <upload dir>/.staging/ first and only moved into
<upload dir>/ once the record that references it is saved:

    with StagedUpload(request.FILES.get("profilePic")) as upload:
        with transaction.atomic():
            UserRecord.objects.create(..., profile_pic=upload.public_path)
            upload.commit()

- Leaving the block without commit() discards the staged file.
- Leaving the block with an exception after commit() removes the finalized
  file as well, so a failed insert never leaves an orphan behind.
- A missing or empty upload stages nothing and public_path stays None.

File names are the millisecond timestamp plus the original (lower-cased)
extension; the stored path is "/uploads/<name>", relative to the public root.
"""

import logging
import os
import time
from pathlib import Path

from django.conf import settings

logger = logging.getLogger(__name__)

STAGING_DIRNAME = ".staging"


def get_upload_dir() -> Path:
    return Path(settings.ROSTER_PUBLIC_ROOT) / settings.ROSTER_UPLOAD_SUBDIR


def _now_ms() -> int:
    return int(time.time() * 1000)


def _extension(original_name) -> str:
    return Path(original_name or "").suffix.lower()


class StagedUpload:
    def __init__(self, uploaded_file):
        self.uploaded_file = uploaded_file
        self.file_name = None
        self.staged_path = None
        self.final_path = None
        self.public_path = None
        self.committed = False

    @property
    def has_file(self) -> bool:
        return self.uploaded_file is not None and bool(getattr(self.uploaded_file, "size", 0))

    def __enter__(self):
        if self.has_file:
            self._stage()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self.rollback()
        elif not self.committed:
            self.discard()
        return False

    def _stage(self):
        upload_dir = get_upload_dir()
        staging_dir = upload_dir / STAGING_DIRNAME
        staging_dir.mkdir(parents=True, exist_ok=True)

        ext = _extension(getattr(self.uploaded_file, "name", ""))
        stamp = _now_ms()
        # Two uploads in the same millisecond: bump until the name is free.
        while (upload_dir / f"{stamp}{ext}").exists() or (staging_dir / f"{stamp}{ext}").exists():
            stamp += 1

        self.file_name = f"{stamp}{ext}"
        self.staged_path = staging_dir / self.file_name
        self.final_path = upload_dir / self.file_name
        try:
            with open(self.staged_path, "xb") as fh:
                for chunk in self.uploaded_file.chunks():
                    fh.write(chunk)
        except OSError:
            self._unlink(self.staged_path)
            raise
        self.public_path = f"/{settings.ROSTER_UPLOAD_SUBDIR}/{self.file_name}"

    def commit(self):
        """Move the staged file into the upload dir. Returns the public path."""
        if self.staged_path is None:
            return None
        os.replace(self.staged_path, self.final_path)
        self.committed = True
        return self.public_path

    def discard(self):
        if self.staged_path is not None and not self.committed:
            logger.warning("Discarding staged upload %s", self.file_name)
            self._unlink(self.staged_path)

    def rollback(self):
        if self.staged_path is None:
            return
        if self.committed:
            logger.warning("Removing finalized upload %s after a failed save", self.file_name)
            self._unlink(self.final_path)
            self.committed = False
        else:
            self.discard()

    @staticmethod
    def _unlink(path):
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.exception("Could not remove %s", path)
