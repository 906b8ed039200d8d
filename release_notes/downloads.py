import hashlib
import os

from ci.util import existing_file
import release_notes.model as rnm


def download_from_file(path: str, chunk_size: int = 4096) -> rnm.Download:
    existing_file(path)

    digest = hashlib.sha256()
    with open(path, 'rb') as f:
        while (chunk := f.read(chunk_size)):
            digest.update(chunk)

    return rnm.Download(
        filename=os.path.basename(path),
        sha256=digest.hexdigest(),
    )
