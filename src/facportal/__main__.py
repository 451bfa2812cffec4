from facportal.cli import cli

cli()
