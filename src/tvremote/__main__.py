from tvremote.cli import app

app(prog_name="tvremote")
