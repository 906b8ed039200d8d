# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import logging

import git

from ci.util import fail
import release_notes.model as rnm

logger = logging.getLogger(__name__)


class GitHelper:
    '''
    read-only access to a local git-repository, as needed for collecting release-notes.

    Revision ranges are interpreted the way `git log from..to` does: all commits reachable
    from `to`, excluding those reachable from `from` (thus `from` itself is excluded, `to` is
    included). Results are returned in git's native (reverse-chronological) order; callers rely
    on this order and do not re-sort.
    '''
    def __init__(
        self,
        repo,
        short_hash_length: int = 12,
    ):
        if repo is None:
            raise ValueError(repo)
        if isinstance(repo, str):
            repo = git.Repo(repo)
        if not isinstance(repo, git.Repo):
            raise ValueError(repo)

        self.repo = repo
        self.short_hash_length = short_hash_length

    def _range(self, from_rev: str, to_rev: str) -> str:
        return f'{from_rev}..{to_rev}'

    def log_range(self, from_rev: str, to_rev: str) -> list[rnm.ChangeEntry]:
        rev_range = self._range(from_rev, to_rev)
        logger.debug(f'listing commits in {rev_range=}')

        return [
            rnm.ChangeEntry(
                commit=commit.hexsha[:self.short_hash_length],
                description=commit.summary,
            )
            for commit in self.repo.iter_commits(rev_range)
        ]

    def authors_in_range(self, from_rev: str, to_rev: str) -> list[str]:
        rev_range = self._range(from_rev, to_rev)
        logger.debug(f'listing authors in {rev_range=}')

        # %aN honours .mailmap (GitPython's Actor does not)
        out = self.repo.git.log('--format=%aN', rev_range)
        return out.splitlines()

    def file_at_revision(self, revision: str, path: str) -> str:
        commit = self.repo.commit(revision)
        try:
            blob = commit.tree / path
        except KeyError:
            fail(f'{path=} does not exist at {revision=} ({commit.hexsha})')

        logger.debug(f'read {path=} at {revision=} ({commit.hexsha})')
        return blob.data_stream.read().decode('utf-8')
