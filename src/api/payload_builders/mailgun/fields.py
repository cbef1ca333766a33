"""Nomes de campos do formulário da API Mailgun (contrato do provedor)."""

FIELD_FROM = "from"
FIELD_SUBJECT = "subject"
FIELD_TEXT = "text"
FIELD_HTML = "html"
FIELD_TO = "to"
FIELD_CC = "cc"
FIELD_BCC = "bcc"
FIELD_TAG = "o:tag"
FIELD_CAMPAIGN = "o:campaign"
FIELD_DKIM = "o:dkim"
FIELD_DELIVERY_TIME = "o:deliverytime"
FIELD_TEST_MODE = "o:testmode"
FIELD_TRACKING = "o:tracking"
FIELD_TRACKING_CLICKS = "o:tracking-clicks"
FIELD_TRACKING_OPENS = "o:tracking-opens"
FIELD_ATTACHMENT = "attachment"
FIELD_INLINE = "inline"

HEADER_PREFIX = "h:"
VARIABLE_PREFIX = "v:"
