"""Example FastAPI app serving HAL documents for customers and orders.

Run with:
    uvicorn examples.hal_example_app:app --reload
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI, HTTPException, Request
from sqlalchemy import Column, Float, ForeignKey, Integer, String, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base, relationship, selectinload

from fastapi_hal import HALRouter, HALSerializer, Link, Resource
from fastapi_hal.middleware import ErrorHandlerMiddleware
from fastapi_hal.pagination import StandardPagination

DATABASE_URL = "sqlite+aiosqlite:///./hal_example.db"

engine = create_async_engine(DATABASE_URL, echo=True)
async_session = async_sessionmaker(engine, expire_on_commit=False)

Base = declarative_base()


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    orders = relationship("Order", back_populates="customer")


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    total = Column(Float, nullable=False)
    currency = Column(String, nullable=False)
    status = Column(String, nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id"))
    customer = relationship("Customer", back_populates="orders")


class CustomerSerializer(HALSerializer):
    class Meta:
        path = "/api/v1/customers"
        model = Customer
        fields = ["name"]
        embedded = {}


class OrderSerializer(HALSerializer):
    class Meta:
        path = "/api/v1/orders"
        model = Order
        fields = ["total", "currency", "status"]
        embedded = {"customer": CustomerSerializer}


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def seed_example_data(session: AsyncSession) -> None:
    """Insert example customers and orders if empty."""
    result = await session.execute(select(Customer.id).limit(1))
    if result.first() is not None:
        return

    ada = Customer(name="Ada Lovelace")
    alan = Customer(name="Alan Turing")
    session.add_all([ada, alan])
    await session.flush()

    session.add_all(
        [
            Order(total=30.0, currency="USD", status="shipped", customer_id=ada.id),
            Order(total=20.0, currency="USD", status="processing", customer_id=ada.id),
            Order(total=12.5, currency="EUR", status="shipped", customer_id=alan.id),
        ]
    )
    await session.commit()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    async with async_session() as session:
        await seed_example_data(session)
    yield


app = FastAPI(
    title="FastAPI HAL Example",
    description="Example API serving application/hal+json documents.",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(ErrorHandlerMiddleware)
router = HALRouter(prefix="/api/v1")
pagination = StandardPagination()


@router.resource("/")
def api_root() -> Resource:
    return (
        Resource.with_self("/api/v1/")
        .add_curie("ea", "/docs/rels/{rel}")
        .add_link("ea:orders", Link("/api/v1/orders{?offset,limit}").with_templated(True))
    )


@router.resource("/orders")
async def list_orders(
    request: Request,
    offset: int = 0,
    limit: int | None = None,
    session: AsyncSession = Depends(get_session),
) -> Resource:
    offset, limit = pagination.normalize(offset, limit)
    total = await session.scalar(select(func.count(Order.id)))
    result = await session.execute(
        select(Order).options(selectinload(Order.customer)).order_by(Order.id).offset(offset).limit(limit)
    )
    return pagination.build_page(
        OrderSerializer.many(result.scalars().all()),
        rel="ea:order",
        base_url=str(request.url),
        total=total or 0,
        offset=offset,
        limit=limit,
    ).add_curie("ea", "/docs/rels/{rel}")


@router.resource("/orders/{order_id}")
async def get_order(order_id: int, session: AsyncSession = Depends(get_session)) -> OrderSerializer:
    order = await session.get(Order, order_id, options=[selectinload(Order.customer)])
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return OrderSerializer(order)


app.include_router(router)
