"""
wigplot/util
~~~~~~~~~~~~
"""
