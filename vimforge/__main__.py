from vimforge.main import cli

cli()
