"""CLI script to create a course and enroll students into it.
Usage: python scripts/enroll_students.py COURSE_NAME STUDENT_NAME [STUDENT_NAME ...]

Students are created by name; running the script again with the same
course id (`--course-id`) replaces that course's enrollments.
"""
import sys
import argparse
import pathlib
from typing import List, Optional
# Ensure `backend/` is on sys.path so `estudos_api` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import Session
from estudos_api.database import engine, create_db_and_tables
from estudos_api import models, repositories


def main(course_name: str, student_names: List[str], course_id: Optional[int] = None):
    """Persist the course and students, then print the stored enrollments."""
    create_db_and_tables()
    with Session(engine) as session:
        students = repositories.StudentRepository(session)
        courses = repositories.CourseRepository(session)
        created = [students.save(models.Student(nome=name)) for name in student_names]
        course = courses.save_with_students(
            models.Course(id=course_id, nome=course_name),
            [s.id for s in created],
        )
        print(f'Course {course.id} ({course.nome}):')
        for s in courses.students(course.id):
            print(f'  student {s.id}: {s.nome}')


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('course_name')
    parser.add_argument('student_names', nargs='+')
    parser.add_argument('--course-id', type=int, help='Replace the enrollments of this course')
    args = parser.parse_args()
    main(args.course_name, args.student_names, course_id=args.course_id)
