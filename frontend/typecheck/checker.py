import logging

from frontend.ast.tree import Program
from utils.error import ErrorReport

from .builder import ClassTableBuilder
from .typechecked import TypeChecked
from .typer import Typer

logger = logging.getLogger(__name__)


def typeCheck(program: Program) -> TypeChecked:
    """
    Run the class-table builder and then the typer over `program`.

    Both phases share one error report, which is closed once at the end:
    a `TypeCheckerException` carrying every semantic error is raised if
    anything was reported, otherwise the checked program is returned.
    """
    reporter = ErrorReport()

    classTable = ClassTableBuilder(reporter).transform(program)
    logger.debug("pass 1 done, %d error(s)", reporter.count())

    Typer(classTable, reporter).transform(program)
    logger.debug("pass 2 done, %d error(s)", reporter.count())

    reporter.close()
    return TypeChecked(program, classTable)
