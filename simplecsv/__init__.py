"""
SimpleCSV - a small editor for plain comma-separated files
"""

__version__ = '1.0.0'
__description__ = 'Plain comma-separated table editor'
