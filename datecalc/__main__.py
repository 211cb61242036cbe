from datecalc.cli import app

app(prog_name="dates")
