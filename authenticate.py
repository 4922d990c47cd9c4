import sys

import msal

from keyvault import AppCertificate

AUTHORITY_HOST = "https://login.microsoftonline.com"


def authenticate_with_certificate(client_id: str, certificate: AppCertificate,
                                  tenant_id: str, scopes: list) -> str:

    app = msal.ConfidentialClientApplication(
        client_id,
        client_credential=certificate.client_credential(),
        authority=f"{AUTHORITY_HOST}/{tenant_id}",
    )
    print(
        f"[auth] Authenticating with certificate on Azure AD:\n"
        f"\tTenant ID: {tenant_id}\n"
        f"\tClient ID: {client_id}\n"
        f"\tScopes: {', '.join(scopes)}",
        file=sys.stderr,
    )
    result = app.acquire_token_for_client(scopes=scopes)
    token = result.get("access_token")
    if not token:
        raise RuntimeError(
            f"No access_token in response: {result.get('error')}: {result.get('error_description')}"
        )
    print("[auth] Authentication successful.", file=sys.stderr)
    return token
