"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all record-kind repositories.
Provides generic create-or-update, lookup, delete, existence and count
operations, and translates driver errors into the store's exception types.

Repositories only flush; committing belongs to the caller's unit of work
(see `decostore.database.unit_of_work`).

Usage:
    class CategoryRepository(BaseRepository[Category]):
        def __init__(self) -> None:
            super().__init__(Category)
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from decostore.database import Base
from decostore.utils.exceptions import ConstraintViolationError, TransientStoreError

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


@contextmanager
def translate_db_errors() -> Iterator[None]:
    """SQLAlchemy 예외를 스토어 예외로 변환합니다.

    Map SQLAlchemy/DBAPI failures onto the store taxonomy:
    IntegrityError -> ConstraintViolationError,
    connection/timeout failures -> TransientStoreError.
    The original exception is chained. Nothing is retried.
    """
    try:
        yield
    except IntegrityError as exc:
        raise ConstraintViolationError(str(exc.orig)) from exc
    except (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError) as exc:
        raise TransientStoreError(str(exc)) from exc


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing the operations every record kind
    shares: save, get_by_id, delete_by_id, exists_by_id.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    def _apply_filters(self, query: Select, filters: dict[str, Any] | None) -> Select:
        # 모델에 없는 컬럼명과 None 값은 무시 — Unknown columns and None values are skipped
        if filters:
            for column_name, value in filters.items():
                if hasattr(self.model, column_name) and value is not None:
                    query = query.where(getattr(self.model, column_name) == value)
        return query

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by id. A missing record yields None,
        never an exception.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Id of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        with translate_db_errors():
            result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다.

        Retrieve all records matching equality filters, ordered by
        `order_by` or by id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 필터 딕셔너리 {'컬럼명': 값} (Filter dict {'column_name': value})
            order_by: 정렬 기준 컬럼 (Column to order by)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = self._apply_filters(select(self.model), filters)
        query = query.order_by(order_by if order_by is not None else self.model.id)

        with translate_db_errors():
            result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record from a dict of column values.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record, id assigned)

        Raises:
            ConstraintViolationError: FK 또는 고유 제약 위반 (FK or unique violation)
        """
        return await self.save(db, self.model(**obj_data))

    async def save(
        self,
        db: AsyncSession,
        obj: ModelType,
    ) -> ModelType:
        """레코드를 저장합니다 — ID가 없으면 삽입, 있으면 갱신.

        Create-or-update: insert when the instance has no id, otherwise
        merge its state onto the stored row.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj: 저장할 모델 인스턴스 (Model instance to persist)

        Returns:
            ModelType: 세션에 연결된 저장된 인스턴스 (Persisted, session-bound instance)

        Raises:
            ConstraintViolationError: FK 또는 고유 제약 위반 (FK or unique violation)
            TransientStoreError: 연결/타임아웃 오류 (Connection or timeout failure)
        """
        with translate_db_errors():
            if obj.id is None:
                db.add(obj)
            else:
                obj = await db.merge(obj)
            await db.flush()
            await db.refresh(obj)
        return obj

    async def update(
        self,
        db: AsyncSession,
        record_id: int,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """기존 레코드를 업데이트합니다.

        Update an existing record by id with the given field values.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 업데이트할 레코드 ID (Id of the record to update)
            update_data: 업데이트할 필드와 값의 딕셔너리
                         (Dictionary of fields and values to update)

        Returns:
            ModelType | None: 업데이트된 레코드 또는 None (Updated record or None)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        with translate_db_errors():
            await db.flush()
            await db.refresh(db_obj)
        return db_obj

    async def delete_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> bool:
        """ID로 레코드를 삭제합니다. 없는 ID는 아무 작업도 하지 않습니다.

        Delete a record by id, cascading through ORM relationships.
        Deleting a missing id is a no-op.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 삭제할 레코드 ID (Id of the record to delete)

        Returns:
            bool: 실제로 삭제했는지 여부 (Whether a row was deleted)

        Raises:
            ConstraintViolationError: 다른 레코드가 참조 중일 때 (Row still referenced)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        with translate_db_errors():
            await db.delete(db_obj)
            await db.flush()
        return True

    async def exists_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> bool:
        """ID에 해당하는 레코드가 존재하는지 확인합니다.

        Check whether a record with the given id exists.
        """
        query: Select = select(self.model.id).where(self.model.id == record_id).limit(1)
        with translate_db_errors():
            found = (await db.execute(query)).scalar_one_or_none()
        return found is not None

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given equality filters exists.
        """
        return await self.count(db, filters) > 0

    async def count(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
    ) -> int:
        """조건에 맞는 레코드 수를 셉니다.

        Count records matching equality filters.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 필터 딕셔너리 (Filter criteria dictionary)

        Returns:
            int: 레코드 수 (Number of matching rows)
        """
        query: Select = self._apply_filters(select(func.count()).select_from(self.model), filters)
        with translate_db_errors():
            total: int = (await db.execute(query)).scalar() or 0
        return total
