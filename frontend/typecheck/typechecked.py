from frontend.ast.tree import Program
from frontend.symbol.classentry import ClassEntry
from frontend.symbol.classtable import ClassTable


class TypeChecked:
    """
    A program that passed both semantic phases, with the class table the code
    generator needs for name and type resolution.
    """

    def __init__(self, program: Program, classTable: ClassTable) -> None:
        self.program = program
        self.classTable = classTable

    @property
    def mainClass(self) -> ClassEntry:
        return self.classTable.get(self.program.mainClass.className)

    def classes(self) -> list[ClassEntry]:
        return self.classTable.values()
