import collections
import collections.abc

import release_notes.model as rnm


def diff(
    previous: rnm.DependencyManifest,
    current: rnm.DependencyManifest,
) -> list[rnm.DependencyChange]:
    '''
    classifies each dependency as added (only in `current`), removed (only in `previous`) or
    updated (differing revisions). Dependencies pinned to the same revision in both manifests
    are omitted.

    The result is sorted by dependency-name (case-sensitive), independent of manifest order.
    '''
    changes = []
    for name in sorted(previous.keys() | current.keys()):
        previous_revision = previous.get(name)
        current_revision = current.get(name)

        if previous_revision == current_revision:
            continue

        changes.append(rnm.DependencyChange(
            name=name,
            previous=previous_revision,
            current=current_revision,
        ))

    return changes


def group_by_kind(
    changes: collections.abc.Iterable[rnm.DependencyChange],
) -> dict[rnm.DependencyChangeKind, list[rnm.DependencyChange]]:
    grouped = collections.defaultdict(list)
    for change in changes:
        grouped[change.kind].append(change)

    return {
        kind: grouped[kind] for kind in rnm.DependencyChangeKind
    }
