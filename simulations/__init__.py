# simulations/__init__.py
"""
Monte Carlo Galton board experiments.

Run a comparison via:
    python -m simulations.compare <levels n> <balls N> <repetitions x> [--workers W] [-v]
"""
