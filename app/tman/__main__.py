from tman.cli.main import app

app(prog_name="tman")
