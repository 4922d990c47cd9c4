from dataclasses import dataclass

KEY_VAULT_NAME_MAX = 24


@dataclass(frozen=True)
class Identifiers:
    site_url: str
    identity: str
    key_vault_name: str
    certificate_name: str
    tenant_id: str
    client_id_secret_name: str
    scope: str


def site_url(environment: str, site: str) -> str:
    return f"https://{environment}.sharepoint.com{site}"


def identity_name(environment: str, name: str) -> str:
    return f"{environment}-{name}"


def key_vault_name(identity: str) -> str:
    # Vault names are capped at 24 chars. Identities sharing a 24-char prefix land on the same vault.
    if len(identity) > KEY_VAULT_NAME_MAX:
        return identity[:KEY_VAULT_NAME_MAX]
    return identity


def certificate_name(identity: str) -> str:
    return identity


def tenant_id(environment: str) -> str:
    return f"{environment}.onmicrosoft.com"


def client_id_secret_name(identity: str) -> str:
    return identity.replace("_", "").replace("-", "")


def sharepoint_scope(environment: str) -> str:
    # app-only auth against SharePoint uses the tenant host + /.default
    return f"https://{environment}.sharepoint.com/.default"


def derive(config: dict) -> Identifiers:
    """Compute every identifier the run needs from the raw config values.

    Nothing is validated; empty or odd values end up in the URLs as-is and
    only show up later as network errors.
    """
    environment = config.get("environment", "")
    identity = identity_name(environment, config.get("name", ""))
    return Identifiers(
        site_url=site_url(environment, config.get("site", "")),
        identity=identity,
        key_vault_name=key_vault_name(identity),
        certificate_name=certificate_name(identity),
        tenant_id=tenant_id(environment),
        client_id_secret_name=client_id_secret_name(identity),
        scope=sharepoint_scope(environment),
    )
