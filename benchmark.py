from cycleindex import CycleIndex, unlabeled
from labeled import EGF, labeled

def octopi():
    N = 15
    print("Labeled octopi: \n", labeled(EGF.octopi()).getstr(N))
    print("Unlabeled octopi: \n", unlabeled(CycleIndex.octopi()).getstr(N))

def trees():
    N = 10
    X, E = CycleIndex.singleton, CycleIndex.set
    T = CycleIndex.rec( lambda t: X() * E().o(t) )
    print("Unlabeled rooted trees: \n", unlabeled(T).getstr(N))
    print("Cycle index of rooted trees: \n", T.getstr(5))

def graphs():
    N = 7
    E = CycleIndex.set()
    G = CycleIndex.subsets() @ (E.of_size_exactly(2) * E)
    print("Unlabeled graphs: \n", unlabeled(G).getstr(N))

def main():
    octopi()
    trees()
    graphs()

if __name__ == '__main__':
    import cProfile
    cProfile.run('main()')
