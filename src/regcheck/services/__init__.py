"""Service layer — wraps domain outcomes in :class:`ServiceResult`."""
