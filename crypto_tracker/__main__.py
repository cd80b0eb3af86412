from crypto_tracker.cli.main import app

app(prog_name="crypto-tracker")
