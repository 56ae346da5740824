# Client-side view-model for the taskflow API.
#
# Components:
#   transport.py - one request per call, failures reported as responses
#   rows.py      - display rows built from canonical records
#   sync.py      - confirm-then-apply local collections
#   pages.py     - modal, selection and form state per collection
