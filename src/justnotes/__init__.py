"""JustNotes - a read-only directory of VTU study materials."""
