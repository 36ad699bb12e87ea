from durctl.cli import cli

cli()
