from uidmap.cli import app

app(prog_name="uidmap")
