"""SafeMeds staff scheduling package.

Organized by feature modules (staff, schedules, shifts, time_off, availability)
with a thin Flask controller layer over service/repository layers.
"""
