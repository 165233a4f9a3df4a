from wikimd.cli import app

app()
