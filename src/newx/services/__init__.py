"""Service layer: operations returning :class:`~newx.services.result.ServiceResult`."""
