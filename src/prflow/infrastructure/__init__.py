"""Infrastructure layer — git subprocesses, browser, workspace files.

Everything that touches the outside world lives here so the driver can be
exercised with fakes.
"""
