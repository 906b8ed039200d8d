import logging

import release_notes.model as rnm

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_PATH = 'vendor.conf'


def parse(raw_text: str | bytes) -> rnm.DependencyManifest:
    '''
    parses a dependency-manifest (`vendor.conf`-style) into a mapping of dependency-name to
    pinned revision.

    Expected format is one dependency per line:

        <name> <revision> [<further fields, e.g. repository-url>]

    Everything following a `#` is a comment. Blank lines and lines with less than two fields
    (after removing comments) are skipped. If a name occurs more than once, the last occurrence
    wins.
    '''
    if isinstance(raw_text, bytes):
        raw_text = raw_text.decode('utf-8')

    entries = {}
    for lineno, line in enumerate(raw_text.splitlines(), start=1):
        line = line.partition('#')[0].strip()
        if not line:
            continue

        fields = line.split()
        if len(fields) < 2:
            logger.debug(f'skipping malformed manifest entry in line {lineno}: {line!r}')
            continue

        name, revision = fields[:2]
        entries[name] = revision

    return rnm.frozen_manifest(entries)
