"""Core building blocks shared by the scraper and the dictionary facade."""
