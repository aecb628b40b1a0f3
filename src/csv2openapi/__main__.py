from csv2openapi.cli import app

app(prog_name="csv2openapi")
