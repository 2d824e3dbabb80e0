import re
from datetime import datetime, timezone

import pytest

from coursepay.application.interfaces.clock import FakeClock
from coursepay.application.interfaces.order_id_generator import RealOrderIdGenerator
from coursepay.domain.value_objects.order_id import OrderId

USER_ID = "3f2b8c1d-9a4e-4b7f-8c2d-1e5f6a7b8c9d"
NOW = datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)


def test_generate_format():
    order_id = OrderId.generate(USER_ID, NOW)
    millis = int(NOW.timestamp() * 1000)
    assert re.fullmatch(rf"ORDER-{millis}-3f2b8c1d-[0-9a-f]{{6}}", str(order_id))


def test_same_user_same_instant_gives_distinct_ids():
    generator = RealOrderIdGenerator(clock=FakeClock(NOW))
    ids = {generator.generate_order_id(USER_ID) for _ in range(50)}
    assert len(ids) == 50


def test_order_id_length_is_bounded():
    with pytest.raises(ValueError):
        OrderId("ORDER-" + "x" * 60)


def test_empty_order_id_is_invalid():
    with pytest.raises(ValueError):
        OrderId("")
