#! /usr/bin/env python3
import argparse
import logging
import os
import sys

import ci.log
import ci.util
import gitutil
import release_notes.downloads as rndl
import release_notes.manifest as rnmf
import release_notes.metadata as rnmd
import release_notes.render as rnr
import release_notes.report as rnrep

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='release-notes',
        description='''\
            release tooling. Creates release-notes from the given release-metadata file, the
            git-history and dependency-changes between the previous and the current release.
            Should be run from the root of the project's repository for a new release.
        ''',
    )
    parser.add_argument(
        'metadata',
        help='path to release-metadata file (e.g. releases/v1.2.0.toml)',
    )
    parser.add_argument(
        '--dry', '-n',
        action='store_true',
        default=False,
        help='run the release tooling as a dry run to print the release notes to stdout',
    )
    parser.add_argument(
        '--template', '-t',
        default=None,
        help='template filepath to use in place of the default',
    )
    parser.add_argument(
        '--repo-worktree',
        default=os.getcwd(),
        help='path to the repository\'s worktree root (defaults to cwd)',
    )
    parser.add_argument(
        '--manifest',
        default=rnmf.DEFAULT_MANIFEST_PATH,
        help='repository-relative path of the dependency-manifest',
    )
    parser.add_argument(
        '--download',
        action='append',
        dest='downloads',
        default=[],
        help='release-artefact to list (with its sha256-digest). may be passed multiple times',
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        default=False,
    )

    return parser.parse_args(argv)


def run(parsed: argparse.Namespace, out=None):
    cfg = rnrep.ReportCfg(
        manifest_path=parsed.manifest,
        template_path=parsed.template,
    )

    metadata = rnmd.load(parsed.metadata)
    version = rnmd.version_from_path(parsed.metadata)
    logger.info(f'Welcome to the {metadata.project_name} release tool...')

    git_helper = gitutil.GitHelper(
        repo=ci.util.existing_dir(parsed.repo_worktree),
    )

    report = rnrep.build_report(
        metadata=metadata,
        version=version,
        vcs=git_helper,
        cfg=cfg,
        downloads=[rndl.download_from_file(path) for path in parsed.downloads],
    )

    template_contents = rnr.load_template(cfg.template_path)

    if parsed.dry:
        release_notes_md = rnr.render(report, template_contents)
        out = out or sys.stdout
        out.write(release_notes_md)
        out.flush()
        return

    logger.info('release complete!')


def main(argv=None) -> int:
    parsed = parse_args(argv)
    ci.log.configure_default_logging(
        stdout_level=logging.DEBUG if parsed.verbose else logging.INFO,
    )

    try:
        run(parsed)
    except Exception as e:
        logger.debug('release-tool failed', exc_info=True)
        ci.util.error(str(e) or repr(e))
        return 1

    return 0


def release_notes_cli():
    sys.exit(main())


if __name__ == '__main__':
    release_notes_cli()
