"""Repository classes encapsulating database operations.

`CrudRepository` implements the four storage operations every entity
gets (find all, find by id, save, delete) against the model named by
the subclass. Repositories return SQLModel objects and commit after
each write; there is no transaction spanning several calls.
"""

import logging
from typing import Generic, Iterable, List, Optional, Type, TypeVar
from sqlmodel import Session, SQLModel, select
from . import models

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


class CrudRepository(Generic[ModelT]):
    """Generic CRUD operations for the table described by `model`."""
    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[ModelT]:
        """Return every row; ordering is whatever the store yields."""
        return self.session.exec(select(self.model)).all()

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """Return the row with primary key `entity_id` or `None`."""
        return self.session.get(self.model, entity_id)

    def save(self, entity: ModelT) -> ModelT:
        """Insert `entity`, or replace the stored row when its id is set.

        Returns the managed instance, refreshed so generated ids are
        populated.
        """
        if entity.id is None:
            self.session.add(entity)
        else:
            entity = self.session.merge(entity)
        self.session.commit()
        self.session.refresh(entity)
        logger.debug("saved %s id=%s", self.model.__name__, entity.id)
        return entity

    def delete(self, entity_id: int) -> None:
        """Delete the row with `entity_id`; unknown ids are ignored."""
        entity = self.session.get(self.model, entity_id)
        if entity is None:
            return
        self.session.delete(entity)
        self.session.commit()
        logger.debug("deleted %s id=%s", self.model.__name__, entity_id)


class ClientRepository(CrudRepository[models.Client]):
    model = models.Client


class ProductRepository(CrudRepository[models.Product]):
    model = models.Product


class EnrollmentRepository:
    """Reads and writes the `matriculas` join table.

    This is the only place the student/course association is stored, so
    both lookup directions query it directly.
    """
    def __init__(self, session: Session):
        self.session = session

    def enroll(self, course_id: int, student_id: int) -> models.Enrollment:
        """Link a course and a student; an existing pair is returned as is."""
        existing = self.session.get(models.Enrollment, (course_id, student_id))
        if existing:
            return existing
        link = models.Enrollment(curso_id=course_id, aluno_id=student_id)
        self.session.add(link)
        self.session.commit()
        return link

    def set_students(self, course_id: int, student_ids: Iterable[int]) -> List[models.Enrollment]:
        """Make the course's enrollments exactly the distinct `student_ids`.

        Pairs already stored are kept, missing ones are inserted and pairs
        for students not listed are removed.
        """
        wanted = set(student_ids)
        current = self.session.exec(
            select(models.Enrollment).where(models.Enrollment.curso_id == course_id)
        ).all()
        have = set()
        for link in current:
            if link.aluno_id in wanted:
                have.add(link.aluno_id)
            else:
                self.session.delete(link)
        for student_id in sorted(wanted - have):
            self.session.add(models.Enrollment(curso_id=course_id, aluno_id=student_id))
        self.session.commit()
        return self.links_for_course(course_id)

    def links_for_course(self, course_id: int) -> List[models.Enrollment]:
        """Return the raw join rows for `course_id`."""
        stmt = select(models.Enrollment).where(models.Enrollment.curso_id == course_id)
        return self.session.exec(stmt).all()

    def students_for_course(self, course_id: int) -> List[models.Student]:
        """Return the students enrolled in `course_id`."""
        stmt = (
            select(models.Student)
            .join(models.Enrollment, models.Enrollment.aluno_id == models.Student.id)
            .where(models.Enrollment.curso_id == course_id)
        )
        return self.session.exec(stmt).all()

    def courses_for_student(self, student_id: int) -> List[models.Course]:
        """Return the courses `student_id` is enrolled in."""
        stmt = (
            select(models.Course)
            .join(models.Enrollment, models.Enrollment.curso_id == models.Course.id)
            .where(models.Enrollment.aluno_id == student_id)
        )
        return self.session.exec(stmt).all()


class StudentRepository(CrudRepository[models.Student]):
    model = models.Student

    def courses(self, student_id: int) -> List[models.Course]:
        """Courses for a student, read from the join table (read-only side)."""
        return EnrollmentRepository(self.session).courses_for_student(student_id)


class CourseRepository(CrudRepository[models.Course]):
    model = models.Course

    def save_with_students(self, course: models.Course, student_ids: Iterable[int]) -> models.Course:
        """Save `course` and replace its enrollments with `student_ids`."""
        course = self.save(course)
        EnrollmentRepository(self.session).set_students(course.id, student_ids)
        return course

    def students(self, course_id: int) -> List[models.Student]:
        """Students enrolled in a course."""
        return EnrollmentRepository(self.session).students_for_course(course_id)
