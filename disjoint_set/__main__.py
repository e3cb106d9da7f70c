import disjoint_set as ds


def main():
    uf = ds.DisjointSet()
    print(uf)

    for k in range(1, 11):
        uf.add(k)
    print(uf.records())

    uf.union(1, 2)
    uf.union(3, 5)
    uf.union(3, 6)

    print(uf.records())
    print("Find(5): {0}".format(uf.find(5)))
    print("Find(6): {0}".format(uf.find(6)))
    print("Find(1): {0}".format(uf.find(1)))


if __name__ == '__main__':
    main()
