from school_adviser.models.neis_dto import (
    AcademyInfo,
    DishNutrient,
    DishOrigin,
    ElementarySchoolTimetable,
    HighSchoolTimetable,
    MealInfo,
    MiddleSchoolTimetable,
    NEISRow,
    SchoolInfo,
    TimetableRow,
    TuitionFee,
)

__all__ = [
    "AcademyInfo",
    "DishNutrient",
    "DishOrigin",
    "ElementarySchoolTimetable",
    "HighSchoolTimetable",
    "MealInfo",
    "MiddleSchoolTimetable",
    "NEISRow",
    "SchoolInfo",
    "TimetableRow",
    "TuitionFee",
]
