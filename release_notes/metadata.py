'''
loading of manually authored release-metadata.

Metadata is read from a TOML-document (YAML is accepted as well, if the file is suffixed
accordingly), for example:

    project_name = "example"
    github_repo = "example-org/example"
    commit = "v1.2.0"
    previous = "v1.1.0"
    pre_release = false
    preface = "This release adds ..."

    [notes.shim]
    title = "New shim API"
    description = "..."

    [breaking.config]
    commit = "abc1234"
    description = "config-format changed"

    [[downloads]]
    filename = "example-1.2.0.tar.gz"
    sha256 = "..."

The release-version is derived from the metadata file's name (see `version_from_path`).
'''

import logging
import os
import tomllib

import dacite
import yaml

from ci.util import (
    existing_file,
    fail,
)
import release_notes.model as rnm

logger = logging.getLogger(__name__)

YAML_SUFFIXES = ('.yaml', '.yml')
METADATA_SUFFIXES = ('.toml', *YAML_SUFFIXES)


def version_from_path(path: str) -> str:
    basename = os.path.basename(path)
    for suffix in METADATA_SUFFIXES:
        if basename.endswith(suffix):
            return basename.removesuffix(suffix)
    return basename


def _read_raw(path: str) -> dict:
    if path.endswith(YAML_SUFFIXES):
        with open(path) as f:
            try:
                raw = yaml.safe_load(f)
            except yaml.YAMLError as e:
                fail(f'{path} is not a valid YAML-document: {e}')
    else:
        with open(path, 'rb') as f:
            try:
                raw = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                fail(f'{path} is not a valid TOML-document: {e}')

    if not isinstance(raw, dict):
        fail(f'expected a mapping at top-level of {path}, found {type(raw).__name__}')

    return raw


def from_dict(raw: dict) -> rnm.ReleaseMetadata:
    return dacite.from_dict(
        data_class=rnm.ReleaseMetadata,
        data=raw,
        config=dacite.Config(
            strict=True,
        ),
    )


def load(path: str) -> rnm.ReleaseMetadata:
    existing_file(path)
    raw = _read_raw(path)

    try:
        metadata = from_dict(raw)
    except dacite.DaciteError as e:
        fail(f'invalid release-metadata in {path}: {e}')

    logger.debug(f'loaded release-metadata for {metadata.project_name} from {path}')
    return metadata
