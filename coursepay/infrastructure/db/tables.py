from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    UniqueConstraint,
)

metadata = MetaData()

payments = Table(
    "payments",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("user_id", String(36), nullable=False),
    Column("course_id", String(36), nullable=False),
    Column("amount", Numeric(12, 2), nullable=False),
    Column("order_id", String(50), nullable=False, unique=True),
    Column("status", String(32), nullable=False, default="pending"),
    Column("gateway_transaction_id", String(64)),
    Column("gateway_payment_type", String(32)),
    Column("created_at", DateTime),
    Column("updated_at", DateTime),
)

enrollments = Table(
    "enrollments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", String(36), nullable=False),
    Column("course_id", String(36), nullable=False),
    Column("progress", Integer, nullable=False, default=0),
    Column("completed_at", DateTime),
    Column("created_at", DateTime),
    UniqueConstraint("user_id", "course_id", name="uq_enrollments_user_course"),
)

courses = Table(
    "courses",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("title", String(255), nullable=False),
    Column("price", Numeric(12, 2), nullable=False, default=0),
    Column("is_free", Boolean, nullable=False, default=False),
    Column("status", String(16), nullable=False, default="published"),
)

profiles = Table(
    "profiles",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("full_name", String(255)),
)

certificates = Table(
    "certificates",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", String(36), nullable=False),
    Column("course_id", String(36), nullable=False),
    Column("certificate_number", String(50), nullable=False, unique=True),
    Column("qr_code_url", String(1024), nullable=False),
    Column("issued_at", DateTime),
    UniqueConstraint("user_id", "course_id", name="uq_certificates_user_course"),
)
