"""Web app: JSON API and HTML pages for the setup finder."""
