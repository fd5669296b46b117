# MIME types
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
GOOGLE_DOCS_MIME_TYPE = "application/vnd.google-apps.document"

# Field selectors
FILE_FIELDS = "id, name, mimeType, parents, webViewLink"
LIST_FILE_FIELDS = f"files({FILE_FIELDS})"
CREATED_FILE_FIELDS = "id, name, mimeType, parents, webViewLink"
DRIVE_LIST_FIELDS = "drives(id, name)"

# Corpora
CORPORA_DRIVE = "drive"
