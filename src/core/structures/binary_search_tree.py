import weakref
from typing import Any, Optional


class TreeNode:
    """
    Nó da Árvore de Busca Binária.
    O próprio valor (data) é a chave de ordenação.
    Os filhos pertencem ao nó; o pai é apenas observado (referência fraca).
    """
    def __init__(self, data: Any, parent: Optional["TreeNode"] = None):
        self.data = data
        self.left: Optional["TreeNode"] = None
        self.right: Optional["TreeNode"] = None
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> Optional["TreeNode"]:
        """Retorna o nó pai, ou None para a raiz."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        left = self.left.data if self.left else None
        right = self.right.data if self.right else None
        return f"TreeNode({self.data!r}, left={left!r}, right={right!r})"


class BinarySearchTree:
    """
    Árvore de Busca Binária simples (sem balanceamento).
    Valores duplicados são rejeitados.
    Inserção e busca são iterativas: uma entrada ordenada degenera a árvore
    numa lista, com altura n, e a recursão estouraria a pilha.
    """
    def __init__(self):
        self.root: Optional[TreeNode] = None
        self.size = 0

    @classmethod
    def with_root(cls, root: TreeNode) -> "BinarySearchTree":
        """Cria a árvore a partir de uma raiz já montada."""
        tree = cls()
        tree.root = root
        tree.size = tree._count_nodes(root)
        return tree

    def insert(self, value: Any) -> bool:
        """
        Insere o valor como nova folha.
        Retorna True se um nó foi criado, False se o valor já existia.
        """
        if self.root is None:
            self.root = TreeNode(value)
            self.size += 1
            return True

        current = self.root
        while True:
            if value == current.data:
                return False
            elif value < current.data:
                if current.left is None:
                    current.left = TreeNode(value, parent=current)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = TreeNode(value, parent=current)
                    break
                current = current.right

        self.size += 1
        return True

    def find_node(self, value: Any) -> Optional[TreeNode]:
        """Busca o nó que guarda o valor. Retorna o TreeNode ou None."""
        current = self.root
        while current:
            if value == current.data:
                return current
            elif value < current.data:
                current = current.left
            else:
                current = current.right
        return None

    def find(self, value: Any) -> bool:
        return self.find_node(value) is not None

    def height(self) -> int:
        """Número de níveis da árvore (0 se vazia)."""
        if self.root is None:
            return 0

        height = 0
        level = [self.root]
        while level:
            height += 1
            # Desce um nível inteiro por vez
            level = [child for node in level for child in (node.left, node.right) if child]
        return height

    def _count_nodes(self, node: Optional[TreeNode]) -> int:
        count = 0
        pending = [node] if node else []
        while pending:
            current = pending.pop()
            count += 1
            if current.left:
                pending.append(current.left)
            if current.right:
                pending.append(current.right)
        return count

    def __contains__(self, value: Any) -> bool:
        return self.find(value)

    def __len__(self):
        return self.size

    def __repr__(self):
        root = self.root.data if self.root else None
        return f"BinarySearchTree(size={self.size}, height={self.height()}, root={root!r})"
