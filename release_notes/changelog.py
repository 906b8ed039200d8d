import collections.abc
import logging

import release_notes.model as rnm

logger = logging.getLogger(__name__)


def assemble_changes(
    entries: collections.abc.Iterable[rnm.ChangeEntry | tuple[str, str]],
) -> list[rnm.ChangeEntry]:
    '''
    returns change-entries in the order they were passed (for git, reverse-chronological).
    The revision-range was already restricted by the caller; no filtering or reordering is done
    here.
    '''
    changes = []
    for entry in entries:
        if isinstance(entry, rnm.ChangeEntry):
            commit, description = entry.commit, entry.description
        else:
            commit, description = entry

        changes.append(rnm.ChangeEntry(
            commit=commit,
            description=description.strip(),
        ))

    return changes


def assemble_contributors(
    raw_names: collections.abc.Iterable[str],
) -> list[str]:
    '''
    deduplicates (exact, case-sensitive match) and sorts contributor-names. Blank names are
    dropped; all other names are kept as-is.
    '''
    names = {
        name for name in raw_names
        if name and name.strip()
    }
    logger.debug(f'found {len(names)} distinct contributors')

    return sorted(names)
