class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    CREATE_FIELD_PREFIX = "ui.create."
    VERIFY_PHONE_INPUT = "ui.verify.phone"
    PAYMENT_METHOD = "ui.pay.method"
    RECEIPT_NOTE = "ui.receipt.note"
    DEBUG_TOGGLE = "debug"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    SESSION_ID = "session_id"
    CREATE_WIZARD = "wizard.create"
    VERIFY_WIZARDS = "wizard.verify"
    CREATED_REQUEST = "data.created_request"
    SHARE_RESULT = "data.share_result"
    SUBMIT_ERROR = "data.submit_error"
    PAYMENT_ERROR = "data.payment_error"
    NOTE_SAVED = "data.note_saved"
    DARK_MODE = "dark_mode"
