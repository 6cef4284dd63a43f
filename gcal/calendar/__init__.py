"""Calendar collaborators: the Google event source and the text renderer.

Components:
    models.py: CalendarEvent, Attendee, EventList
    google.py: event listing through the Calendar v3 REST API
    render.py: day-grouped text table
"""
