"""
Tip Calculator
Bill, tip percentage or custom tip, and a round-up toggle in;
formatted tip and total out.
"""

__version__ = '1.0.0'
