from classlint.cli.main import cli

cli()
