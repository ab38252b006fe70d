"""shopdesk attendance package.

Organized by feature modules (attendance, employees, shifts, reports, qr)
with a thin Flask controller layer over service/repository layers.
"""
