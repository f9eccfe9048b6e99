from product_api.cli import app

app()
