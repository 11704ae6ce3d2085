"""Cotacao server - serves the current USD/BRL bid over HTTP."""
