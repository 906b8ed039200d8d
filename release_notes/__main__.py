import release_notes.cli

release_notes.cli.release_notes_cli()
