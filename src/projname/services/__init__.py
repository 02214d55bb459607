"""Service layer: operations consumed by the CLI and any other frontend.

Every public service method returns a :class:`ServiceResult`.
"""
