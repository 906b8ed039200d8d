import pytest

import ci.util
import release_notes.model as rnm
import release_notes.render as rnr


@pytest.fixture
def report() -> rnm.ReleaseReport:
    metadata = rnm.ReleaseMetadata(
        project_name='example',
        github_repo='example-org/example',
        commit='v1.2.0',
        previous='v1.1.0',
        pre_release=True,
        preface='This release adds a shim API.\n',
        notes={
            'shim': rnm.Note(title='New shim API', description='Shims are loaded dynamically.'),
        },
        breaking={
            'config': rnm.BreakingChange(commit='abc1234', description='config-format changed'),
        },
    )

    return rnm.ReleaseReport(
        metadata=metadata,
        version='v1.2.0',
        changes=(
            rnm.ChangeEntry(commit='2b3c4d5e6f70', description='Add shim API'),
            rnm.ChangeEntry(commit='1a2b3c4d5e6f', description='Fix typo'),
        ),
        contributors=('Alice', 'Bob'),
        dependencies=(
            rnm.DependencyChange(name='libA', previous='rev0', current=None),
            rnm.DependencyChange(name='libB', previous='rev2', current='rev3'),
            rnm.DependencyChange(name='libC', previous=None, current='rev9'),
        ),
        downloads=(
            rnm.Download(filename='example-1.2.0.tar.gz', sha256='0123abcd'),
        ),
    )


def test_render_default_template(report):
    rendered = rnr.render(report, rnr.load_template())
    lines = rendered.splitlines()

    assert lines[0] == 'example v1.2.0'
    assert 'Welcome to the v1.2.0 release of example!' in lines
    assert '*This is a pre-release of example*' in lines
    assert 'This release adds a shim API.' in lines
    assert 'https://github.com/example-org/example/issues.' in lines

    assert '### New shim API' in lines
    assert 'Shims are loaded dynamically.' in lines
    assert '### Breaking Changes' in lines
    assert '* abc1234 config-format changed' in lines

    contributors_idx = lines.index('### Contributors')
    assert lines[contributors_idx + 1:contributors_idx + 3] == ['* Alice', '* Bob']

    changes_idx = lines.index('### Changes')
    assert lines[changes_idx + 1:changes_idx + 3] == [
        '* 2b3c4d5e6f70 Add shim API',
        '* 1a2b3c4d5e6f Fix typo',
    ]

    assert '### Dependency Changes' in lines
    assert (
        'Previous release can be found at '
        '[v1.1.0](https://github.com/example-org/example/releases/tag/v1.1.0)'
    ) in lines
    assert '* **libC** rev9' in lines
    assert '* **libA** rev0' in lines
    assert '* **libB** rev2 -> rev3' in lines
    assert lines.index('**Added**') < lines.index('**Removed**') < lines.index('**Updated**')

    assert '| example-1.2.0.tar.gz | 0123abcd |' in lines


def test_render_omits_empty_sections(report):
    metadata = rnm.ReleaseMetadata(
        project_name='example',
        github_repo='example-org/example',
        commit='v1.2.0',
        previous='v1.2.0',
    )
    report = rnm.ReleaseReport(
        metadata=metadata,
        version='v1.2.0',
        changes=(),
        contributors=(),
        dependencies=(),
    )

    rendered = rnr.render(report, rnr.load_template())

    assert 'pre-release' not in rendered
    assert '### Breaking Changes' not in rendered
    assert '### Downloads' not in rendered
    assert '**Added**' not in rendered


def test_render_custom_template(report):
    assert rnr.render(report, '${release.project_name}-${release.version}') == 'example-v1.2.0'


def test_render_template_syntax_error(report):
    with pytest.raises(ci.util.Failure):
        rnr.render(report, '% for change in release.changes\n${change}\n')


def test_render_template_execution_error(report):
    with pytest.raises(ci.util.Failure):
        rnr.render(report, '${release.does_not_exist}')


def test_load_template_missing(tmpdir):
    with pytest.raises(ci.util.Failure):
        rnr.load_template(str(tmpdir.join('missing.mako')))
