"""Folio - portfolio taxonomy and cash snapshot domain library."""
