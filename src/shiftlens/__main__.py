from shiftlens.cli.main import app

app(prog_name="shiftlens")
