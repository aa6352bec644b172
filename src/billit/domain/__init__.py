"""Domain layer for billit application.

Services live in their own modules (``billit.domain.client``,
``billit.domain.bill``, ...) and are imported from there; importing them here
would cycle back through ``billit.database.base``.
"""
