"""Scheduling app package.

Appointments of a realtor (viewings, listing presentations, client
meetings) and the calendar views built on them: the month grid and the
today / tomorrow / selected-day agenda. The date logic lives in
``apps.scheduling.domain`` and works on model instances or plain mappings.
"""
