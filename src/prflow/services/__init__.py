"""Service layer — scenario construction, the step driver, run/plan operations.

Services return :class:`~prflow.services.result.ServiceResult`; they never
print final results or exit the process.
"""
