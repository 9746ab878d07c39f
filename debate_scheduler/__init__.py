"""
Debate tournament scheduling by simulated annealing.
Pairs teams and assigns judge panels for one round at a time.
"""

__version__ = "0.1.0"
