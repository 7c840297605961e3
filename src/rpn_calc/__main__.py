from rpn_calc.cli import app

app()
