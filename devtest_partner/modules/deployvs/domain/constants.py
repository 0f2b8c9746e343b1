"""Constants shared by the virtual service deploy flow."""

DEPLOY_MAR_PATH = "/api/Dcm/VSEs/{vse_name}/actions/deployMar/"
VIRTUAL_SERVICE_ACCEPT = "application/vnd.ca.lisaInvoke.virtualService+json"

FIELD_FILE_URI = "fileURI"
FIELD_FILE = "file"

# any path containing one of these (case-insensitive) is resolved by the registry itself
REMOTE_MARKERS = ("file", "http")

STATUS_CREATED = 201
STATUS_INVALID_CREDENTIALS = 200

MSG_DEPLOYING = "Deploying virtual service from {path}"
MSG_LOCATION = "DevTest location: {host}:{port}"
MSG_RESPONSE_BODY = "Response body: {body}"
MSG_SUCCESS = "Virtual service {path} was successfully deployed"
MSG_ERROR = "Deployment of virtual service failed"
MSG_MISSING_FILE = "File {path} is not present in the workspace of job"
MSG_INVALID_CREDENTIALS = "Invalid credentials for DevTest Registry"
MSG_RESPONSE_STATUS = "Response status code: {status}, response body: {body}"

MSG_MISSING_VSE = "VSE name cannot be empty!"
MSG_MISSING_MAR_FILES = "Paths to MAR files cannot be empty"
MSG_MISSING_ENDPOINT = "DevTest Registry host/port is not configured"
