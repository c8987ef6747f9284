import logging
from typing import Optional

from frontend.ast.node import ARITHMETIC_OPS
from frontend.ast.tree import *
from frontend.ast.visitor import Visitor
from frontend.scope.scopestack import ScopeStack
from frontend.symbol.classentry import ClassEntry
from frontend.symbol.classtable import ClassTable
from frontend.symbol.methodentry import MethodEntry
from frontend.type import BOOL, ERROR, INT, INT_ARRAY, MiniJavaType, ObjectType
from utils.error import ErrorReport

from .builder import MAIN_METHOD

logger = logging.getLogger(__name__)

"""
The typer phase: type check abstract syntax tree against the class table.

Every expression visit returns its type. A subexpression that fails to check
is reported once and typed as ERROR, which is compatible with everything, so
the enclosing expressions carry on without further reports.
"""


class Context:
    """
    What the typer knows while inside one class: the class and the variable scopes.
    """

    def __init__(self, entry: ClassEntry) -> None:
        self.entry = entry
        self.scopes = ScopeStack()

    @property
    def className(self) -> str:
        return self.entry.name


class Typer(Visitor[Context, MiniJavaType]):
    def __init__(self, classTable: ClassTable, reporter: ErrorReport) -> None:
        self.classTable = classTable
        self.reporter = reporter

    # Entry of this phase
    def transform(self, program: Program) -> Program:
        program.accept(self, None)
        return program

    def visitProgram(self, program: Program, ctx: None) -> None:
        program.mainClass.accept(self, None)
        for decl in program.classes:
            entry = self.classTable.get(decl.ident)
            if entry is None or entry.decl is not decl:
                # A duplicate of an earlier class: its name resolves elsewhere.
                logger.debug("skipping duplicate class %s", decl.ident)
                continue
            decl.accept(self, Context(entry))

    def visitMainClass(self, main: MainClass, ctx: None) -> None:
        entry = self.classTable.get(main.className)
        ctx = Context(entry)
        method = entry.methods.get(MAIN_METHOD)
        ctx.scopes.open(method.locals)
        main.statement.accept(self, ctx)
        ctx.scopes.close()

    def visitClassDecl(self, decl: ClassDecl, ctx: Context) -> None:
        logger.debug("checking class %s", decl.ident)
        self.checkSuperclass(decl, ctx.entry)

        for var in decl.vars:
            self.checkDeclared(var.var_t.type, var)

        for scope in self.classTable.fieldScopes(ctx.entry):
            ctx.scopes.open(scope)
        decl.methods.accept(self, ctx)
        for _ in range(ctx.scopes.depth()):
            ctx.scopes.close()

        self.checkOverrides(decl, ctx.entry)

    def visitMethodDecl(self, decl: MethodDecl, ctx: Context) -> None:
        method = ctx.entry.methods.get(decl.ident)
        if method is None or method.decl is not decl:
            logger.debug("skipping duplicate method %s.%s", ctx.className, decl.ident)
            return

        self.checkDeclared(method.returnType, decl.ret_t)
        for var in (*decl.formals, *decl.vars):
            self.checkDeclared(var.var_t.type, var)

        ctx.scopes.open(method.locals)
        decl.statements.accept(self, ctx)
        actual = decl.returnExpr.accept(self, ctx)
        if not self.compatible(actual, method.returnType):
            self.reporter.typeMismatch(method.returnType, actual, decl.returnExpr.lineno)
        ctx.scopes.close()

    def checkSuperclass(self, decl: ClassDecl, entry: ClassEntry) -> None:
        if decl.superName is None:
            return
        if self.classTable.get(decl.superName) is None:
            self.reporter.undefinedClass(decl.superName, decl.lineno)
        elif self.classTable.isCyclic(entry):
            self.reporter.cyclicInheritance(decl.ident, decl.lineno)

    def checkOverrides(self, decl: ClassDecl, entry: ClassEntry) -> None:
        for name, method in entry.methods.entries():
            for ancestor in self.classTable.ancestors(entry):
                overridden = ancestor.methods.get(name)
                if overridden is None:
                    continue
                if not method.sameSignature(overridden):
                    lineno = method.decl.lineno if method.decl is not None else decl.lineno
                    self.reporter.invalidOverride(decl.ident, name, lineno)
                # Only the nearest definition counts; it was checked against its own ancestors.
                break

    def checkDeclared(self, t: MiniJavaType, node: Node) -> None:
        if t.isObject() and self.classTable.get(t.className) is None:
            self.reporter.undefinedClass(t.className, node.lineno)

    def known(self, t: MiniJavaType) -> MiniJavaType:
        # Declarations naming an unknown class were already reported.
        if t.isObject() and self.classTable.get(t.className) is None:
            return ERROR
        return t

    def compatible(self, src: MiniJavaType, dst: MiniJavaType) -> bool:
        return self.classTable.isCompatible(self.known(src), self.known(dst))

    def expect(self, expr: Expression, expected: MiniJavaType, ctx: Context) -> MiniJavaType:
        actual = expr.accept(self, ctx)
        if not self.compatible(actual, expected):
            self.reporter.typeMismatch(expected, actual, expr.lineno)
        return actual

    def lookupVar(self, name: str, node: Node, ctx: Context) -> Optional[MiniJavaType]:
        t = ctx.scopes.lookupOverStack(name)
        if t is None:
            self.reporter.undefinedId(name, node.lineno)
            return None
        return self.known(t)

    def visitBlock(self, block: Block, ctx: Context) -> None:
        for stmt in block:
            stmt.accept(self, ctx)

    def visitIf(self, stmt: If, ctx: Context) -> None:
        self.checkCondition(stmt.cond, ctx)
        stmt.then.accept(self, ctx)
        stmt.otherwise.accept(self, ctx)

    def visitWhile(self, stmt: While, ctx: Context) -> None:
        self.checkCondition(stmt.cond, ctx)
        stmt.body.accept(self, ctx)

    def checkCondition(self, cond: Expression, ctx: Context) -> None:
        actual = cond.accept(self, ctx)
        if not self.compatible(actual, BOOL):
            self.reporter.conditionTypeMismatch(actual, cond.lineno)

    def visitPrint(self, stmt: Print, ctx: Context) -> None:
        #! printing is integer-only
        self.expect(stmt.expr, INT, ctx)

    def visitAssign(self, stmt: Assign, ctx: Context) -> None:
        target = self.lookupVar(stmt.ident, stmt, ctx)
        actual = stmt.rhs.accept(self, ctx)
        if target is not None and not self.compatible(actual, target):
            self.reporter.assignmentTypeMismatch(stmt.ident, target, actual, stmt.lineno)

    def visitArrayAssign(self, stmt: ArrayAssign, ctx: Context) -> None:
        target = self.lookupVar(stmt.ident, stmt, ctx)
        if target is not None and not self.compatible(target, INT_ARRAY):
            self.reporter.typeMismatch(INT_ARRAY, target, stmt.lineno)
        self.expect(stmt.index, INT, ctx)
        self.expect(stmt.rhs, INT, ctx)

    def visitUnary(self, expr: Unary, ctx: Context) -> MiniJavaType:
        self.expect(expr.operand, BOOL, ctx)
        return BOOL

    def visitBinary(self, expr: Binary, ctx: Context) -> MiniJavaType:
        if expr.op in ARITHMETIC_OPS:
            operand, result = INT, INT
        elif expr.op == BinaryOp.LT:
            operand, result = INT, BOOL
        else:
            operand, result = BOOL, BOOL
        self.expect(expr.lhs, operand, ctx)
        self.expect(expr.rhs, operand, ctx)
        return result

    def visitArrayLookup(self, expr: ArrayLookup, ctx: Context) -> MiniJavaType:
        self.expect(expr.array, INT_ARRAY, ctx)
        self.expect(expr.index, INT, ctx)
        return INT

    def visitArrayLength(self, expr: ArrayLength, ctx: Context) -> MiniJavaType:
        self.expect(expr.array, INT_ARRAY, ctx)
        return INT

    def visitNewArray(self, expr: NewArray, ctx: Context) -> MiniJavaType:
        self.expect(expr.size, INT, ctx)
        return INT_ARRAY

    def visitNewObject(self, expr: NewObject, ctx: Context) -> MiniJavaType:
        if self.classTable.get(expr.className) is None:
            self.reporter.undefinedClass(expr.className, expr.lineno)
            return ERROR
        return ObjectType(expr.className)

    def visitCall(self, call: Call, ctx: Context) -> MiniJavaType:
        receiver = call.receiver.accept(self, ctx)
        args = [arg.accept(self, ctx) for arg in call.args]

        receiver = self.known(receiver)
        if receiver.isError():
            return ERROR
        if not receiver.isObject():
            self.reporter.typeMismatch("object", receiver, call.receiver.lineno)
            return ERROR

        method = self.classTable.lookupMethod(receiver.className, call.method)
        if method is None:
            self.reporter.undefinedMethod(receiver.className, call.method, call.lineno)
            return ERROR
        if method.parameterNum != len(args):
            self.reporter.arityMismatch(call.method, method.parameterNum, len(args), call.lineno)
            return ERROR

        return self.checkArguments(call, method, args)

    def checkArguments(
        self, call: Call, method: MethodEntry, args: list[MiniJavaType]
    ) -> MiniJavaType:
        for position, (actual, expected) in enumerate(zip(args, method.parameterTypes), 1):
            if not self.compatible(actual, expected):
                self.reporter.argumentTypeMismatch(
                    call.method, position, expected, actual, call.args[position - 1].lineno
                )
        return self.known(method.returnType)

    def visitThis(self, expr: This, ctx: Context) -> MiniJavaType:
        return ObjectType(ctx.className)

    def visitIdentifier(self, ident: Identifier, ctx: Context) -> MiniJavaType:
        t = self.lookupVar(ident.value, ident, ctx)
        return ERROR if t is None else t

    def visitIntLiteral(self, expr: IntLiteral, ctx: Context) -> MiniJavaType:
        return INT

    def visitBoolLiteral(self, expr: BoolLiteral, ctx: Context) -> MiniJavaType:
        return BOOL
