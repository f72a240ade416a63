from ustreasury_yield_curve.cli import main

main()
