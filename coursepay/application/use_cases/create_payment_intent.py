import logging
from decimal import Decimal

from coursepay.api.schemas.payments import CreatePaymentRequest, CreatePaymentResponse
from coursepay.application.interfaces.course_repo import CourseRecord, CourseRepo
from coursepay.application.interfaces.identity_provider import IdentityProvider, UserIdentity
from coursepay.application.interfaces.order_id_generator import OrderIdGenerator
from coursepay.application.interfaces.payment_gateway import (
    ChargeResult,
    CustomerDetails,
    PaymentGateway,
)
from coursepay.application.interfaces.payment_repo import PaymentRepo
from coursepay.application.interfaces.profile_repo import ProfileRecord, ProfileRepo
from coursepay.application.interfaces.transaction_manager import TransactionManager
from coursepay.application.use_cases.common import authenticate, store_transaction
from coursepay.domain.errors import CourseNotFoundError, GatewayError, PriceMismatchError

DEFAULT_CUSTOMER_NAME = "User"


class CreatePaymentIntentUseCase:
    def __init__(
        self,
        payment_repo: PaymentRepo,
        course_repo: CourseRepo,
        profile_repo: ProfileRepo,
        payment_gateway: PaymentGateway,
        identity_provider: IdentityProvider,
        order_id_generator: OrderIdGenerator,
        transaction_manager: TransactionManager,
    ) -> None:
        self._payment_repo = payment_repo
        self._course_repo = course_repo
        self._profile_repo = profile_repo
        self._payment_gateway = payment_gateway
        self._identity_provider = identity_provider
        self._order_id_generator = order_id_generator
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        authorization: str | None,
        request: CreatePaymentRequest,
    ) -> CreatePaymentResponse:
        user = await authenticate(self._identity_provider, authorization)

        async with store_transaction(self._transaction_manager, "load_course"):
            course = await self._course_repo.get_by_id(request.course_id)
            if not course:
                raise CourseNotFoundError(request.course_id)
            self._check_price(course, request.amount)
            profile = await self._profile_repo.get_by_id(user.id)

        # A new order id per call: a retried request never reuses one.
        order_id = self._order_id_generator.generate_order_id(user.id)

        # Committed before the gateway call so a crash leaves a reconcilable
        # pending intent behind.
        async with store_transaction(self._transaction_manager, "create_pending"):
            intent = await self._payment_repo.create_pending(
                payment_id=self._order_id_generator.generate_payment_id(),
                user_id=user.id,
                course_id=course.id,
                amount=request.amount,
                order_id=order_id,
            )

        charge = await self._charge(order_id, request.amount, user, profile)

        try:
            async with self._transaction_manager.start():
                await self._payment_repo.attach_gateway_transaction(
                    payment_id=intent.id,
                    gateway_transaction_id=charge.transaction_id,
                    gateway_payment_type=charge.payment_type,
                )
        except Exception as exc:  # noqa: BLE001
            self._logger.warning(
                "Could not attach gateway transaction to payment intent",
                exc_info=exc,
                extra={"order_id": order_id, "transaction_id": charge.transaction_id},
            )

        self._logger.info(
            "Payment intent created",
            extra={
                "order_id": order_id,
                "user_id": user.id,
                "course_id": course.id,
                "transaction_id": charge.transaction_id,
            },
        )
        return CreatePaymentResponse(
            success=True,
            payment_url=charge.payment_url,
            order_id=order_id,
            transaction_id=charge.transaction_id,
        )

    def _check_price(self, course: CourseRecord, amount: Decimal) -> None:
        if course.is_free:
            return
        if Decimal(course.price) != amount:
            raise PriceMismatchError(course.id, expected=course.price, received=amount)

    async def _charge(
        self,
        order_id: str,
        amount: Decimal,
        user: UserIdentity,
        profile: ProfileRecord | None,
    ) -> ChargeResult:
        customer = CustomerDetails(
            first_name=(profile.full_name if profile and profile.full_name else DEFAULT_CUSTOMER_NAME),
            email=user.email,
        )
        try:
            return await self._payment_gateway.charge(
                order_id=order_id,
                amount=amount,
                customer=customer,
            )
        except GatewayError as exc:
            self._logger.error(
                "Gateway charge failed",
                extra={
                    "order_id": order_id,
                    "http_status": exc.http_status,
                    "provider_payload": exc.provider_payload,
                },
            )
            raise
        except Exception as exc:
            self._logger.error(
                "Unexpected gateway failure",
                exc_info=exc,
                extra={"order_id": order_id},
            )
            raise GatewayError("Unexpected gateway failure") from exc
