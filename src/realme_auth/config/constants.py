"""RealMe environments and authentication contexts.

These values are defined by RealMe and are not configurable.
"""

# Messaging Test Service, Integration Test Environment, Production
ENV_MTS = "mts"
ENV_ITE = "ite"
ENV_PROD = "prod"

ALLOWED_ENVIRONMENTS: tuple[str, ...] = (ENV_MTS, ENV_ITE, ENV_PROD)

_AUTHN_PREFIX = "urn:nzl:govt:ict:stds:authn:deployment:GLS:SAML:2.0:ac:classes:"

AUTHN_LOW_STRENGTH = _AUTHN_PREFIX + "LowStrength"
AUTHN_MOD_STRENGTH = _AUTHN_PREFIX + "ModStrength"
AUTHN_MOD_MOBILE_SMS = _AUTHN_PREFIX + "ModStrength::OTP:Mobile:SMS"
AUTHN_MOD_TOKEN_SID = _AUTHN_PREFIX + "ModStrength::OTP:Token:SID"

ALLOWED_AUTHN_CONTEXTS: tuple[str, ...] = (
    AUTHN_LOW_STRENGTH,
    AUTHN_MOD_STRENGTH,
    AUTHN_MOD_MOBILE_SMS,
    AUTHN_MOD_TOKEN_SID,
)

# Environment variables naming the signing certificate location
CERT_DIR_ENV_VAR = "REALME_CERT_DIR"
SIGNING_CERT_FILENAME_ENV_VAR = "REALME_SIGNING_CERT_FILENAME"
