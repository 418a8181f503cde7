# Services package init
"""
QuirkNotes Backend — Services Layer

Service Inventory:
    - NoteService: note CRUD, partial updates and color validation
"""
