from trailertally.cli.main import cli

cli()
