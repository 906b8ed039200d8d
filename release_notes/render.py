import logging
import os

import mako.exceptions

from ci.util import (
    existing_file,
    fail,
)
import makoutil
import release_notes.dependencies as rnd
import release_notes.model as rnm

logger = logging.getLogger(__name__)

own_dir = os.path.abspath(os.path.dirname(__file__))
DEFAULT_TEMPLATE_PATH = os.path.join(own_dir, 'resources', 'release-notes.mako')


def load_template(path: str | None = None) -> str:
    if not path:
        path = DEFAULT_TEMPLATE_PATH

    existing_file(path)
    logger.debug(f'using release-notes template from {path}')

    with open(path) as f:
        return f.read()


def render(
    report: rnm.ReleaseReport,
    template_contents: str,
) -> str:
    '''
    renders the given report using a mako-template. The report is exposed to the template as
    `release`. In addition, the following names are available:

    dependency_kinds: dependency-changes grouped by kind (see `dependencies.group_by_kind`)
    added, removed, updated: the `DependencyChangeKind` members
    indent: filter indenting continuation-lines for list-items

    Any template error aborts rendering (no partial output is returned).
    '''
    try:
        return makoutil.render_template(
            template_contents,
            release=report,
            dependency_kinds=rnd.group_by_kind(report.dependencies),
            added=rnm.DependencyChangeKind.ADDED,
            removed=rnm.DependencyChangeKind.REMOVED,
            updated=rnm.DependencyChangeKind.UPDATED,
            indent=makoutil.indent_func(depth=2),
        )
    except mako.exceptions.MakoException as e:
        fail(f'invalid release-notes template: {e}')
    except Exception as e:
        fail(f'failed to render release-notes template: {e!r}')
