import logging
from fastapi import BackgroundTasks, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from .core.config import settings
from .database import get_session, get_session_factory
from .exceptions import Unauthorized
from .utils import decode_jwt_token
from .application.ports.notifier import AlertDispatcher
from .application.services.auth_service import AuthService
from .application.services.inbox_service import InboxService
from .application.services.low_stock_service import LowStockAlertService
from .application.services.product_service import ProductService
from .application.services.profile_service import ProfileService
from .application.services.recipient_resolver import RecipientResolver
from .application.services.stats_service import StatsService
from .application.services.watchlist_service import WatchlistService
from .infrastructure.email.dispatchers import BackgroundAlertDispatcher, DisabledAlertDispatcher
from .infrastructure.email.smtp_notifier import SmtpNotifier
from .infrastructure.persistence.sqlalchemy.repositories.notification_repository_sql import SqlNotificationRepository
from .infrastructure.persistence.sqlalchemy.repositories.product_repository_sql import SqlProductRepository
from .infrastructure.persistence.sqlalchemy.repositories.sector_repository_sql import SqlSectorRepository
from .infrastructure.persistence.sqlalchemy.repositories.user_repository_sql import SqlUserRepository
from .infrastructure.persistence.sqlalchemy.repositories.watchlist_repository_sql import SqlWatchlistRepository

logger = logging.getLogger(__name__)

oauth2_scheme = HTTPBearer(auto_error=False)

def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(oauth2_scheme),
    session: Session = Depends(get_session),
) -> int:
    if not credentials or not credentials.credentials:
        raise Unauthorized("No token provided")
    payload = decode_jwt_token(credentials.credentials)
    if not payload:
        raise Unauthorized("Invalid token")
    try:
        user_id = int(payload.get("sub"))
    except (ValueError, TypeError):
        raise Unauthorized("Invalid token: invalid user ID format")
    if not SqlUserRepository(session).get_by_id(user_id):
        logger.warning(f"Token for unknown user {user_id}")
        raise Unauthorized("Invalid token")
    return user_id

def get_alert_dispatcher(
    background_tasks: BackgroundTasks,
    session_factory=Depends(get_session_factory),
) -> AlertDispatcher:
    if not settings.email_configured:
        return DisabledAlertDispatcher()
    return BackgroundAlertDispatcher(background_tasks, SmtpNotifier(settings), session_factory)

def get_low_stock_service(
    session: Session = Depends(get_session),
    dispatcher: AlertDispatcher = Depends(get_alert_dispatcher),
) -> LowStockAlertService:
    return LowStockAlertService(
        product_repo=SqlProductRepository(session),
        notification_repo=SqlNotificationRepository(session),
        resolver=RecipientResolver(SqlUserRepository(session), SqlWatchlistRepository(session)),
        dispatcher=dispatcher,
    )

def get_product_service(
    session: Session = Depends(get_session),
    alerts: LowStockAlertService = Depends(get_low_stock_service),
) -> ProductService:
    return ProductService(
        repo=SqlProductRepository(session),
        sector_repo=SqlSectorRepository(session),
        user_repo=SqlUserRepository(session),
        alerts=alerts,
    )

def get_watchlist_service(
    session: Session = Depends(get_session),
    alerts: LowStockAlertService = Depends(get_low_stock_service),
) -> WatchlistService:
    return WatchlistService(SqlWatchlistRepository(session), SqlProductRepository(session), alerts)

def get_stats_service(session: Session = Depends(get_session)) -> StatsService:
    return StatsService(SqlProductRepository(session), SqlNotificationRepository(session))

def get_inbox_service(session: Session = Depends(get_session)) -> InboxService:
    return InboxService(SqlNotificationRepository(session))

def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(SqlUserRepository(session))

def get_profile_service(session: Session = Depends(get_session)) -> ProfileService:
    return ProfileService(SqlUserRepository(session))
