import release_notes.changelog as rnc
import release_notes.model as rnm


def test_assemble_contributors():
    assert rnc.assemble_contributors(['Bob', 'Alice', 'Bob', ' ']) == ['Alice', 'Bob']


def test_assemble_contributors_is_case_sensitive():
    assert rnc.assemble_contributors(['bob', 'Bob', '', '\t']) == ['Bob', 'bob']


def test_assemble_contributors_exact_match():
    assert rnc.assemble_contributors(['Bob', ' Bob', 'Bob']) == [' Bob', 'Bob']


def test_assemble_contributors_empty():
    assert rnc.assemble_contributors([]) == []


def test_assemble_changes_preserves_order():
    entries = [
        rnm.ChangeEntry(commit='c3', description='third'),
        ('c2', ' second\n'),
        rnm.ChangeEntry(commit='c1', description='first'),
    ]

    assert rnc.assemble_changes(entries) == [
        rnm.ChangeEntry(commit='c3', description='third'),
        rnm.ChangeEntry(commit='c2', description='second'),
        rnm.ChangeEntry(commit='c1', description='first'),
    ]


def test_assemble_changes_empty():
    assert rnc.assemble_changes(()) == []
