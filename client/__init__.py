"""Cotacao client - fetches the USD/BRL bid from the quote server."""
