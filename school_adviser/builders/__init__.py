from school_adviser.builders.academy import AcademyBuilder
from school_adviser.builders.base import NEISBuilder
from school_adviser.builders.meal import MealBuilder
from school_adviser.builders.school import SchoolBuilder
from school_adviser.builders.timetable import (
    ElementarySchoolTimetableBuilder,
    HighSchoolTimetableBuilder,
    MiddleSchoolTimetableBuilder,
    TimetableBuilder,
)

__all__ = [
    "AcademyBuilder",
    "ElementarySchoolTimetableBuilder",
    "HighSchoolTimetableBuilder",
    "MealBuilder",
    "MiddleSchoolTimetableBuilder",
    "NEISBuilder",
    "SchoolBuilder",
    "TimetableBuilder",
]
