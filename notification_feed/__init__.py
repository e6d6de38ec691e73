"""Grouped notification feed service.

The grouping engine lives in
:mod:`notification_feed.application.use_cases.notifications.grouping`; the
remaining packages expose it through a snapshot store and a FastAPI surface.
"""
