"""In-memory entity store.

Layout:
    fields.py        # Name, Phone, Email, Address, Remark, Tag value objects
    patient.py       # Patient entity
    appointment.py   # Appointment entity
    bill.py          # Bill entity (paid/unpaid)
    unique_list.py   # Identity-enforcing ordered collections
    address_book.py  # Aggregate owning the three unique lists
    manager.py       # Model: address book + filtered patient view
"""
