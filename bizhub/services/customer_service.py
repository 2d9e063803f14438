from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from bizhub.core.dates import utcnow
from bizhub.core.errors import ConflictError, NotFoundError
from bizhub.core.notification_rules import EntityRef
from bizhub.models.customer import Customer
from bizhub.schemas.common import changed_fields, validate_input
from bizhub.schemas.customer import CustomerCreate, CustomerFilters, CustomerUpdate
from bizhub.services.cascade import delete_entity


def _email_taken(db: Session, email: str, exclude_id: Optional[int] = None) -> bool:
    stmt = select(Customer.id).where(Customer.email == email)
    if exclude_id is not None:
        stmt = stmt.where(Customer.id != exclude_id)
    return db.execute(stmt.limit(1)).first() is not None


def _commit_customer(db: Session, conflict_message: str) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(conflict_message) from exc
    except SQLAlchemyError:
        db.rollback()
        raise


def create_customer(db: Session, payload) -> Customer:
    payload = validate_input(CustomerCreate, payload)
    conflict_message = "Customer with email '{}' already exists".format(payload.email)
    if _email_taken(db, payload.email):
        raise ConflictError(conflict_message)

    now = utcnow()
    customer = Customer(**payload.model_dump(), created_at=now, updated_at=now)
    db.add(customer)
    _commit_customer(db, conflict_message)
    return customer


def list_customers(db: Session, filters=None) -> list[Customer]:
    filters = validate_input(CustomerFilters, filters)
    stmt = select(Customer)
    if filters.status:
        stmt = stmt.where(Customer.status == filters.status)
    search = (filters.search or "").strip()
    if search:
        stmt = stmt.where(
            or_(
                Customer.name.icontains(search, autoescape=True),
                Customer.email.icontains(search, autoescape=True),
                Customer.company.icontains(search, autoescape=True),
            )
        )
    return list(db.execute(stmt.order_by(Customer.id)).scalars().all())


def get_customer(db: Session, customer_id: int) -> Optional[Customer]:
    return db.get(Customer, customer_id)


def update_customer(db: Session, payload) -> Customer:
    payload = validate_input(CustomerUpdate, payload)
    customer = db.get(Customer, payload.id)
    if customer is None:
        raise NotFoundError("Customer", payload.id)

    changes = changed_fields(payload)
    conflict_message = "Email '{}' is already in use by another customer".format(changes.get("email"))
    if "email" in changes and _email_taken(db, changes["email"], exclude_id=customer.id):
        raise ConflictError(conflict_message)

    for field, value in changes.items():
        setattr(customer, field, value)
    customer.updated_at = utcnow()
    _commit_customer(db, conflict_message)
    return customer


def delete_customer(db: Session, customer_id: int) -> bool:
    return delete_entity(db, Customer, EntityRef("customer", customer_id))


__all__ = ["create_customer", "delete_customer", "get_customer", "list_customers", "update_customer"]
