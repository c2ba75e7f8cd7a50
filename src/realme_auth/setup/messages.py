"""Message catalogue for the RealMe setup task.

Every user-visible line the setup task prints comes from here, keyed by a
stable identifier so tests can match on the kind of error rather than wording.
"""

MESSAGES: dict[str, str] = {
    "ERR_NOT_CLI": (
        "This task can only be run from the command line, it outputs certificate "
        "data and contact details."
    ),
    "ERR_ENV_NOT_SPECIFIED": (
        "No RealMe environment specified. Pass --for-env with one of: {allowed_envs}"
    ),
    "ERR_ENV_NOT_ALLOWED": (
        "RealMe environment '{env}' is not valid. Use one of: {allowed_envs}"
    ),
    "ERR_CERT_DIR_MISSING": (
        "No certificate directory configured. Set REALME_CERT_DIR or "
        "certificates.cert_dir."
    ),
    "ERR_CERT_DIR_NOT_READABLE": "Certificate directory {dir} is not readable.",
    "ERR_CERT_NO_SIGNING_CERT": (
        "No readable signing certificate found. Set {const} to a readable file "
        "inside the certificate directory."
    ),
    "ERR_CERT_SIGNING_CERT_CONTENT": (
        "Signing certificate {file} does not contain a BEGIN/END CERTIFICATE block "
        "with a valid certificate."
    ),
    "ERR_CONFIG_NO_ENTITYID": "No service provider entity ID configured (entity_id).",
    "ERR_CONFIG_ENTITYID": (
        "Entity ID '{entity_id}' is invalid. It must be an https URL on a public "
        "host, e.g. https://www.domain.govt.nz/privacy-realm/service-name"
    ),
    "ERR_CONFIG_ENTITYID_SERVICE_NAME": (
        "Service name '{service_name}' in entity ID '{entity_id}' must be between "
        "1 and {max_length} characters."
    ),
    "ERR_CONFIG_ENTITYID_PRIVACY_REALM": (
        "Privacy realm '{privacy_realm}' in entity ID '{entity_id}' must not be empty."
    ),
    "ERR_CONFIG_NO_AUTHNCONTEXT": (
        "No authentication context configured for the '{env}' environment."
    ),
    "ERR_CONFIG_INVALID_AUTHNCONTEXT": (
        "Authentication context '{context}' for the '{env}' environment is not one "
        "of the contexts RealMe accepts."
    ),
    "ERR_CONFIG_NO_ORGANISATION_NAME": (
        "No organisation name configured (metadata.organisation_name)."
    ),
    "ERR_CONFIG_NO_ORGANISATION_DISPLAY_NAME": (
        "No organisation display name configured (metadata.organisation_display_name)."
    ),
    "ERR_CONFIG_NO_ORGANISATION_URL": (
        "No organisation URL configured (metadata.organisation_url)."
    ),
    "ERR_CONFIG_NO_SUPPORT_CONTACT_COMPANY": (
        "No support contact company configured (metadata.contact_support.company)."
    ),
    "ERR_CONFIG_NO_SUPPORT_CONTACT_FIRST_NAMES": (
        "No support contact first names configured "
        "(metadata.contact_support.first_names)."
    ),
    "ERR_CONFIG_NO_SUPPORT_CONTACT_SURNAME": (
        "No support contact surname configured (metadata.contact_support.surname)."
    ),
    "ERR_CONFIG_NO_ACS_URL": (
        "No assertion consumer service URL configured for the '{env}' environment."
    ),
    "VALIDATION_SUCCESS": "Validation succeeded, continuing with setup.",
    "METADATA_INTRO": (
        "Metadata XML is listed below for the '{env}' RealMe environment, this "
        "should be sent to the agency so they can pass it on to RealMe Operations "
        "staff"
    ),
    "BUILD_FINISH": "RealMe setup complete for the '{env}' environment.",
}


def message(key: str, **params: object) -> str:
    """Look up a message and fill in its parameters.

    Args:
        key: Message identifier, e.g. "ERR_CONFIG_NO_ENTITYID"
        **params: Values for the message's {placeholders}

    Returns:
        Formatted message text

    Raises:
        KeyError: If the key is unknown
    """
    return MESSAGES[key].format(**params)
