# Routes package init
"""
QuirkNotes Backend — API Routes Package
=========================================

Route Inventory:
    - notes.py:   POST   /postNote
                  GET    /getAllNotes
                  DELETE /deleteNote/{id}
                  DELETE /deleteAllNotes
                  PATCH  /patchNote/{id}
                  PATCH  /updateNoteColor/{id}
    - health.py:  GET    /health

Routes stay thin: extract request data, call NoteService, return its result.
"""
