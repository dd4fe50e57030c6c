from pkgbump.cli import app

app(prog_name="pkgbump")
