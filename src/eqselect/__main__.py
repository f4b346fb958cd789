from eqselect.cli import app

app()
