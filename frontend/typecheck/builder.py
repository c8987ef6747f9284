import logging
from typing import Union

from frontend.ast.tree import *
from frontend.ast.visitor import Visitor
from frontend.symbol.classentry import ClassEntry
from frontend.symbol.classtable import ClassTable
from frontend.symbol.methodentry import MethodEntry
from frontend.symbol.symboltable import SymbolTable
from frontend.type import STRING_ARRAY, VOID, MiniJavaType
from utils.error import DuplicateNameError, ErrorReport

logger = logging.getLogger(__name__)

MAIN_METHOD = "main"

"""
The class-table builder phase: collect every class, field, method, parameter
and local declared in the abstract syntax tree into symbol tables.

Duplicate names are reported and the build carries on, so one run surfaces
all of them. Types named in declarations are not resolved here.
"""

Owner = Union[ClassEntry, MethodEntry, SymbolTable[MiniJavaType]]


class ClassTableBuilder(Visitor[Owner, None]):
    def __init__(self, reporter: ErrorReport) -> None:
        self.reporter = reporter
        self.classTable = ClassTable()

    # Entry of this phase
    def transform(self, program: Program) -> ClassTable:
        program.accept(self, self.classTable)
        logger.debug("class table built: %s", ", ".join(self.classTable.names()))
        return self.classTable

    def visitProgram(self, program: Program, ctx: Owner) -> None:
        program.mainClass.accept(self, ctx)
        program.classes.accept(self, ctx)

    def visitMainClass(self, main: MainClass, ctx: Owner) -> None:
        entry = ClassEntry(main.className, None, main)
        method = MethodEntry(MAIN_METHOD, VOID, None)
        # Fresh tables: neither put can collide.
        entry.methods.put(MAIN_METHOD, method)
        method.parameters.put(main.argName, STRING_ARRAY)
        self._declare(self.classTable, main.className, entry, main)

    def visitClassDecl(self, decl: ClassDecl, ctx: Owner) -> None:
        entry = ClassEntry(decl.ident, decl.superName, decl)
        # On a duplicate the first class keeps the name; members of this one
        # are still collected into the detached entry.
        self._declare(self.classTable, decl.ident, entry, decl)

        decl.vars.accept(self, entry.fields)
        decl.methods.accept(self, entry)

    def visitMethodDecl(self, decl: MethodDecl, ctx: ClassEntry) -> None:
        method = MethodEntry(decl.ident, decl.ret_t.type, decl)
        self._declare(ctx.methods, decl.ident, method, decl)

        decl.formals.accept(self, method.parameters)
        for var in decl.vars:
            #! parameters and locals share one scope
            if method.parameters.containsKey(var.ident):
                self.reporter.duplicateDefinition(var.ident, var.lineno)
                continue
            var.accept(self, method.locals)

    def visitVarDecl(self, decl: VarDecl, ctx: SymbolTable[MiniJavaType]) -> None:
        self._declare(ctx, decl.ident, decl.var_t.type, decl)

    def _declare(self, table: SymbolTable, name: str, value: object, node: Node) -> None:
        try:
            table.put(name, value)
        except DuplicateNameError:
            self.reporter.duplicateDefinition(name, node.lineno)
