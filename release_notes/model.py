import dataclasses
import enum
import types
import typing


DependencyManifest = typing.Mapping[str, str]
'''
dependency-name -> pinned revision (typically a commit-digest). Built by `manifest.parse`,
read-only afterwards.
'''


def frozen_manifest(entries: dict[str, str]) -> DependencyManifest:
    return types.MappingProxyType(dict(entries))


class DependencyChangeKind(enum.StrEnum):
    ADDED = 'added'
    REMOVED = 'removed'
    UPDATED = 'updated'


@dataclasses.dataclass(frozen=True)
class DependencyChange:
    name: str
    previous: str | None
    current: str | None

    def __post_init__(self):
        if self.previous is None and self.current is None:
            raise ValueError(f'{self.name}: at least one of previous, current must be set')
        if self.previous == self.current:
            raise ValueError(f'{self.name}: unchanged revision {self.current} is not a change')

    @property
    def kind(self) -> DependencyChangeKind:
        if self.previous is None:
            return DependencyChangeKind.ADDED
        if self.current is None:
            return DependencyChangeKind.REMOVED
        return DependencyChangeKind.UPDATED


@dataclasses.dataclass(frozen=True)
class ChangeEntry:
    commit: str
    description: str


@dataclasses.dataclass(frozen=True)
class Note:
    title: str
    description: str


@dataclasses.dataclass(frozen=True)
class BreakingChange:
    description: str
    commit: str = ''


@dataclasses.dataclass(frozen=True)
class Download:
    filename: str
    sha256: str


@dataclasses.dataclass(frozen=True, kw_only=True)
class ReleaseMetadata:
    '''
    manually authored release-metadata (see `metadata.load`)

    commit: revision of the release being created
    previous: revision of the previous release (exclusive lower bound of changelog)
    notes: curated notes, keyed by an arbitrary identifier
    breaking: breaking changes, keyed by an arbitrary identifier
    '''
    project_name: str
    github_repo: str
    commit: str
    previous: str
    pre_release: bool = False
    preface: str = ''
    notes: dict[str, Note] = dataclasses.field(default_factory=dict)
    breaking: dict[str, BreakingChange] = dataclasses.field(default_factory=dict)
    downloads: list[Download] = dataclasses.field(default_factory=list)

    def __post_init__(self):
        # declared as dict/list for dacite; exposed read-only
        object.__setattr__(self, 'notes', types.MappingProxyType(dict(self.notes)))
        object.__setattr__(self, 'breaking', types.MappingProxyType(dict(self.breaking)))
        object.__setattr__(self, 'downloads', tuple(self.downloads))


@dataclasses.dataclass(frozen=True, kw_only=True)
class ReleaseReport:
    metadata: ReleaseMetadata
    version: str
    changes: tuple[ChangeEntry, ...]
    contributors: tuple[str, ...]
    dependencies: tuple[DependencyChange, ...]
    downloads: tuple[Download, ...] = ()

    @property
    def project_name(self) -> str:
        return self.metadata.project_name

    @property
    def github_repo(self) -> str:
        return self.metadata.github_repo

    @property
    def commit(self) -> str:
        return self.metadata.commit

    @property
    def previous(self) -> str:
        return self.metadata.previous

    @property
    def pre_release(self) -> bool:
        return self.metadata.pre_release

    @property
    def preface(self) -> str:
        return self.metadata.preface

    @property
    def notes(self) -> typing.Mapping[str, Note]:
        return self.metadata.notes

    @property
    def breaking(self) -> typing.Mapping[str, BreakingChange]:
        return self.metadata.breaking
