import dataclasses
import logging
import typing

import release_notes.changelog as rnc
import release_notes.dependencies as rnd
import release_notes.manifest as rnmf
import release_notes.model as rnm

logger = logging.getLogger(__name__)


class VersionControl(typing.Protocol):
    '''
    queries against version-control needed for building a release-report (see
    `gitutil.GitHelper` for the git-based implementation).

    `log_range` is expected to return entries in reverse-chronological order.
    '''
    def log_range(self, from_rev: str, to_rev: str) -> list[rnm.ChangeEntry]: ...

    def authors_in_range(self, from_rev: str, to_rev: str) -> list[str]: ...

    def file_at_revision(self, revision: str, path: str) -> str: ...


@dataclasses.dataclass(frozen=True, kw_only=True)
class ReportCfg:
    '''
    manifest_path: repository-relative path of the dependency-manifest
    template_path: path of the release-notes template; None selects the default template
    '''
    manifest_path: str = rnmf.DEFAULT_MANIFEST_PATH
    template_path: str | None = None


def dependency_changes(
    vcs: VersionControl,
    previous: str,
    commit: str,
    manifest_path: str = rnmf.DEFAULT_MANIFEST_PATH,
) -> list[rnm.DependencyChange]:
    previous_manifest = rnmf.parse(vcs.file_at_revision(previous, manifest_path))
    current_manifest = rnmf.parse(vcs.file_at_revision(commit, manifest_path))
    logger.info(
        f'{manifest_path}: {len(previous_manifest)} dependencies at {previous}, '
        f'{len(current_manifest)} at {commit}'
    )

    return rnd.diff(
        previous=previous_manifest,
        current=current_manifest,
    )


def build_report(
    metadata: rnm.ReleaseMetadata,
    version: str,
    vcs: VersionControl,
    cfg: ReportCfg = ReportCfg(),
    downloads: typing.Iterable[rnm.Download] = (),
) -> rnm.ReleaseReport:
    previous, commit = metadata.previous, metadata.commit

    dependencies = dependency_changes(
        vcs=vcs,
        previous=previous,
        commit=commit,
        manifest_path=cfg.manifest_path,
    )

    changes = rnc.assemble_changes(vcs.log_range(previous, commit))
    logger.info(f'creating new release {version} with {len(changes)} new changes...')

    contributors = rnc.assemble_contributors(vcs.authors_in_range(previous, commit))
    logger.info(
        f'found {len(contributors)} contributors and {len(dependencies)} dependency changes'
    )

    return rnm.ReleaseReport(
        metadata=metadata,
        version=version,
        changes=tuple(changes),
        contributors=tuple(contributors),
        dependencies=tuple(dependencies),
        downloads=(*metadata.downloads, *downloads),
    )
