"""
Entry point for Bag of Holding.
No logic here; just bootstraps the application.
"""

from bag_of_holding.cli import main


if __name__ == "__main__":
    main()
