import logging
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class HeapError(Exception):
    """Erro base das operações de índice do heap."""
    message = "Erro no heap"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class IndexOutOfBounds(HeapError):
    message = "Acesso a elementos fora dos limites do heap não é permitido"


class NoLeft(HeapError):
    message = "O elemento não tem filho à esquerda, é uma folha"


class NoRight(HeapError):
    message = "O elemento não tem filho à direita"


class EmptyHeap(HeapError):
    message = "O heap está vazio"


class HeapType:
    MIN_HEAP = "MIN_HEAP"
    MAX_HEAP = "MAX_HEAP"


class BinaryHeap:
    """
    Heap binário representado num array (lista plana).
    Pai, filho esquerdo e direito saem da aritmética de índices:
        pai(i) = ((i + 1) // 2) - 1,  esq(i) = 2i + 1,  dir(i) = 2i + 2

    Só a orientação MIN_HEAP está implementada; construir um MAX_HEAP
    levanta NotImplementedError.
    A lista recebida é usada diretamente como armazenamento e modificada
    no lugar. Chame build_heap() antes de confiar em minimum()/extract_min().
    """
    def __init__(self, heap_type: str, elements: List[Any]):
        if heap_type not in (HeapType.MIN_HEAP, HeapType.MAX_HEAP):
            raise ValueError(f"Tipo de heap desconhecido: {heap_type!r}")

        self.heap_type = heap_type
        self.heap = elements

    def build_heap(self):
        if self.heap_type == HeapType.MIN_HEAP:
            self.build_min_heap()
        else:
            raise NotImplementedError("build_heap ainda não suporta MAX_HEAP")

    def build_min_heap(self):
        """Constrói o min-heap de baixo para cima (O(n))."""
        heap_size = len(self.heap)
        if heap_size <= 1:
            return

        for index in range(heap_size // 2 - 1, -1, -1):
            result = self._heapify_from(index)
            logger.debug("min_heapify do elemento %d terminou: %s", index, result)

    def min_heapify(self, index: int):
        """
        Desce o elemento em 'index' até restaurar a propriedade de min-heap.

        Levanta IndexOutOfBounds se 'index' não existe (inclusive negativo).
        Chamada direta sobre uma folha levanta NoLeft; quem chama decide se
        isso conta como sucesso.
        """
        if index < 0 or index >= len(self.heap):
            raise IndexOutOfBounds()

        left = self.left(index)

        # Sem filho direito: usa o próprio índice, que nunca vence a comparação
        try:
            right = self.right(index)
        except NoRight:
            right = index

        smallest = left if self.heap[left] < self.heap[index] else index
        if self.heap[right] < self.heap[smallest]:
            smallest = right

        if smallest != index:
            self.heap[index], self.heap[smallest] = self.heap[smallest], self.heap[index]
            # Chegar a uma folha durante a descida é o fim normal
            try:
                self.min_heapify(smallest)
            except (NoLeft, NoRight):
                pass

    def parent(self, index: int) -> int:
        if index <= 0 or index >= len(self.heap):
            raise IndexOutOfBounds()
        return ((index + 1) // 2) - 1

    def left(self, index: int) -> int:
        if index < 0:
            raise IndexOutOfBounds()
        left_index = (index * 2) + 1
        if left_index >= len(self.heap):
            raise NoLeft()
        return left_index

    def right(self, index: int) -> int:
        if index < 0:
            raise IndexOutOfBounds()
        right_index = (index * 2) + 2
        if right_index >= len(self.heap):
            raise NoRight()
        return right_index

    def minimum(self) -> Optional[Any]:
        """Retorna o menor elemento sem removê-lo (None se vazio)."""
        return self.heap[0] if not self.is_empty() else None

    def extract_min(self) -> Optional[Any]:
        """Remove e retorna o menor elemento (O(log n)). None se vazio."""
        if self.is_empty():
            return None

        if len(self.heap) == 1:
            return self.heap.pop()

        minimum = self.heap[0]
        self.heap[0] = self.heap.pop()

        result = self._heapify_from(0)
        logger.debug("min_heapify após extração terminou: %s", result)

        return minimum

    def _heapify_from(self, index: int) -> str:
        """Roda min_heapify tratando folha como sucesso; devolve o desfecho para o log."""
        try:
            self.min_heapify(index)
        except NoLeft as e:
            return f"folha ({e})"
        return "ok"

    def is_empty(self) -> bool:
        return len(self.heap) == 0

    def __len__(self):
        return len(self.heap)

    def __repr__(self):
        return f"BinaryHeap({self.heap_type}, {self.heap})"
