from lesson.visitor.visitor import Visitor
from lesson.visitor.sequence_visitor import BoundedSequenceVisitor, NO_BLOCK_NOTICE, check_callback, hello_t
