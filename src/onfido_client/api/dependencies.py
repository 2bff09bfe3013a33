"""FastAPI dependencies for receiving webhook notifications."""

from collections.abc import Awaitable, Callable

from fastapi import HTTPException, Request, status

from onfido_client.core.errors import DecodeError, InvalidSignatureError, MissingSignatureError
from onfido_client.schemas import WebhookRequest
from onfido_client.services.webhook_handler import Webhook


def verified_webhook_dependency(
    webhook: Webhook,
) -> Callable[[Request], Awaitable[WebhookRequest]]:
    """Build a dependency that yields the verified notification of a request.

    Example:
        webhook = Webhook.from_env()
        WebhookDep = Annotated[WebhookRequest, Depends(verified_webhook_dependency(webhook))]

        @router.post("/onfido/webhook")
        async def receive(notification: WebhookDep) -> dict[str, str]:
            ...

    Args:
        webhook: Handler holding the webhook token.

    Returns:
        Dependency callable raising HTTPException 401 for a missing or invalid
        signature and 400 for a body that is not a notification.
    """

    async def _verified_webhook(request: Request) -> WebhookRequest:
        try:
            return await webhook.parse_from_request(request)
        except (MissingSignatureError, InvalidSignatureError) as err:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(err),
            ) from err
        except DecodeError as err:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid webhook payload",
            ) from err

    return _verified_webhook
